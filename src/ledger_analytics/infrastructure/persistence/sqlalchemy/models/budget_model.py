"""SQLAlchemy model for budgets."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from sqlalchemy import Boolean, Date, ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from ledger_analytics.infrastructure.persistence.sqlalchemy.models.base import Base


class BudgetModel(Base):
    """Database model for budgets.

    A budget without ``category_id`` limits all expenses.
    """

    __tablename__ = "budgets"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    category_id: Mapped[str | None] = mapped_column(
        String(36),
        ForeignKey("categories.id", ondelete="CASCADE"),
        nullable=True,
    )
    amount: Mapped[Decimal] = mapped_column(Numeric(14, 2), nullable=False)
    period_type: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="monthly",
        comment="monthly, quarterly, yearly or custom",
    )
    period_start: Mapped[date] = mapped_column(Date, nullable=False)
    period_end: Mapped[date] = mapped_column(Date, nullable=False)
    alert_percentage: Mapped[Decimal] = mapped_column(
        Numeric(5, 2),
        nullable=False,
        default=Decimal("80"),
    )
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
