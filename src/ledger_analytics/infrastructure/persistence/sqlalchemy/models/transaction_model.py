"""SQLAlchemy model for ledger transactions."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ledger_analytics.infrastructure.persistence.sqlalchemy.models.base import Base


class TransactionModel(Base):
    """Database model for ledger transactions."""

    __tablename__ = "transactions"

    __table_args__ = (
        Index("ix_transactions_occurred_at", "occurred_at"),
        Index("ix_transactions_type_occurred_at", "type", "occurred_at"),
        Index("ix_transactions_category_id", "category_id"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    type: Mapped[str] = mapped_column(String(20), nullable=False)
    account_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    destination_account_id: Mapped[str | None] = mapped_column(
        String(36),
        nullable=True,
        comment="Receiving account of a transfer",
    )
    category_id: Mapped[str | None] = mapped_column(
        String(36),
        ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True,
    )
    amount: Mapped[Decimal] = mapped_column(Numeric(14, 2), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    occurred_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    is_pending: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
