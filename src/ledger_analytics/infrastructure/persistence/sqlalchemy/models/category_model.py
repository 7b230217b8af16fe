"""SQLAlchemy model for categories."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from ledger_analytics.infrastructure.persistence.sqlalchemy.models.base import Base


class CategoryModel(Base):
    """Database model for transaction categories."""

    __tablename__ = "categories"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        comment="income, expense or transfer",
    )
