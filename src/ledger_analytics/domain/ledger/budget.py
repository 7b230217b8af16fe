"""Budget value object."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DEFAULT_ALERT_PERCENTAGE = Decimal("80")


class Budget(BaseModel):
    """Spending limit over an inclusive calendar period.

    A budget without ``category_id`` covers all expenses.
    """

    id: str
    name: str
    category_id: Optional[str] = None
    category_name: Optional[str] = None
    amount: Decimal = Field(ge=0)
    period_start: date
    period_end: date
    alert_percentage: Decimal = DEFAULT_ALERT_PERCENTAGE

    model_config = ConfigDict(frozen=True)

    @field_validator("amount", "alert_percentage", mode="before")
    @classmethod
    def validate_decimal(cls, v: Any) -> Decimal:
        if isinstance(v, Decimal):
            return v
        return Decimal(str(v))

    @model_validator(mode="after")
    def validate_period(self) -> Budget:
        if self.period_end < self.period_start:
            msg = "Budget period_end must not be before period_start"
            raise ValueError(msg)
        return self

    def contains(self, day: date) -> bool:
        """Whether ``day`` falls inside the inclusive budget period."""
        return self.period_start <= day <= self.period_end
