"""Analytics DTOs for visualization and reporting.

These read models are built fresh on every call and never mutated
afterwards, so they are frozen and safe to share between consumers.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional


class TrendDirection(str, Enum):
    UP = "up"
    DOWN = "down"
    FLAT = "flat"


class ChangeOutcome(str, Enum):
    """Presentation-free classification of a percentage change."""

    FAVORABLE = "favorable"
    UNFAVORABLE = "unfavorable"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class PeriodBucket:
    """Income and expenses aggregated for one calendar period."""

    period_key: str
    period_label: str
    income: Decimal
    expenses: Decimal

    @property
    def balance(self) -> Decimal:
        return self.income - self.expenses


@dataclass(frozen=True)
class TrendFit:
    """Least-squares trend line over an index-vs-value window."""

    slope: Decimal
    intercept: Decimal
    direction: TrendDirection
    point_count: int
    slope_pct_of_mean: Optional[Decimal] = None  # omitted when the mean is zero
    fitted_values: tuple[Decimal, ...] = ()

    def value_at(self, index: int) -> Decimal:
        return self.slope * index + self.intercept


@dataclass(frozen=True)
class MetricComparison:
    """Current vs previous value of one metric."""

    current: Decimal
    previous: Decimal
    delta: Decimal
    percentage: Optional[Decimal]  # None when previous is zero
    outcome: ChangeOutcome


@dataclass(frozen=True)
class PeriodComparison:
    """Trailing window of a trend series against the window before it."""

    window: int
    income: MetricComparison
    expenses: MetricComparison
    balance: MetricComparison


@dataclass(frozen=True)
class YtdComparison:
    """Year-to-date totals of the current year against the same months last year."""

    current_year: int
    previous_year: int
    months_elapsed: int
    income: MetricComparison
    expenses: MetricComparison
    balance: MetricComparison


@dataclass(frozen=True)
class PeriodExtremes:
    """Best and worst period of a window by balance."""

    best: PeriodBucket
    worst: PeriodBucket


@dataclass(frozen=True)
class CategorySummary:
    """Single category slice of a distribution (for pie charts)."""

    category_id: Optional[str]  # None for the uncategorized bucket
    display_name: str
    total: Decimal
    share: Decimal  # 0-100 scale
    transaction_count: int = 0

    @property
    def is_uncategorized(self) -> bool:
        return self.category_id is None


@dataclass(frozen=True)
class BudgetProgress:
    """Spend-vs-limit progress of one active budget."""

    budget_id: str
    display_name: str
    category_id: Optional[str]
    limit_amount: Decimal
    spent: Decimal
    percentage: Optional[Decimal]  # uncapped; None when the limit is zero
    alert_percentage: Decimal
    days_remaining: int
    category_name: Optional[str] = None

    @property
    def remaining(self) -> Decimal:
        return self.limit_amount - self.spent

    @property
    def is_over_budget(self) -> bool:
        return self.spent > self.limit_amount

    @property
    def is_alerting(self) -> bool:
        return self.percentage is not None and self.percentage >= self.alert_percentage


@dataclass(frozen=True)
class DailyActivityPoint:
    """Aggregate magnitude of one calendar day."""

    date: date
    value: Decimal


@dataclass(frozen=True)
class HeatmapCell:
    """One day slot in the heatmap.

    Padding cells use ``date == ""`` so they can never be confused with a
    day that exists but has a zero value.
    """

    date: str
    value: Decimal
    intensity: float
    is_padding: bool = False


@dataclass(frozen=True)
class HeatmapMatrix:
    """Week-major matrix: each column holds seven consecutive days."""

    columns: tuple[tuple[HeatmapCell, ...], ...]
    max_value: Decimal

    @property
    def week_count(self) -> int:
        return len(self.columns)

    def row(self, index: int) -> tuple[HeatmapCell, ...]:
        return tuple(column[index] for column in self.columns)

