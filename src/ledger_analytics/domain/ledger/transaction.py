"""Transaction value object.

Records arrive from the read side already fetched. They are validated once,
here, so the analytics services never special-case missing or malformed
fields.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ledger_analytics.domain.shared.time import ensure_tz_aware


class TransactionType(str, Enum):
    """Direction of a ledger transaction."""

    INCOME = "income"
    EXPENSE = "expense"
    TRANSFER = "transfer"


class Transaction(BaseModel):
    """Immutable ledger transaction.

    ``amount`` is never negative; the effect on a balance is determined by
    ``type`` alone.
    """

    id: str
    account_id: str
    category_id: Optional[str] = None
    category_name: Optional[str] = None
    type: TransactionType
    amount: Decimal = Field(ge=0)
    occurred_at: datetime
    is_pending: bool = False

    model_config = ConfigDict(frozen=True)

    @field_validator("amount", mode="before")
    @classmethod
    def validate_amount(cls, v: Any) -> Decimal:
        if isinstance(v, Decimal):
            return v
        if isinstance(v, bool):
            msg = "Transaction amount must be numeric"
            raise ValueError(msg)
        return Decimal(str(v))

    @field_validator("occurred_at")
    @classmethod
    def validate_occurred_at(cls, v: datetime) -> datetime:
        return ensure_tz_aware(v)

    @property
    def is_income(self) -> bool:
        return self.type == TransactionType.INCOME

    @property
    def is_expense(self) -> bool:
        return self.type == TransactionType.EXPENSE
