"""Overview DTOs: one aggregation pass with independently failing sections."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

from ledger_analytics.application.dtos.analytics.analytics_dto import (
    BudgetProgress,
    CategorySummary,
    HeatmapMatrix,
    PeriodBucket,
    PeriodComparison,
    PeriodExtremes,
    TrendFit,
    YtdComparison,
)

T = TypeVar("T")


class SectionStatus(str, Enum):
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class SectionResult(Generic[T]):
    """Outcome of one optional overview section.

    An unavailable section carries the reason instead of a value; it is
    never an empty value standing in for a failure.
    """

    status: SectionStatus
    value: Optional[T] = None
    reason: Optional[str] = None

    @classmethod
    def available(cls, value: T) -> SectionResult[T]:
        return cls(status=SectionStatus.AVAILABLE, value=value)

    @classmethod
    def unavailable(cls, reason: str) -> SectionResult[T]:
        return cls(status=SectionStatus.UNAVAILABLE, reason=reason)

    @property
    def is_available(self) -> bool:
        return self.status == SectionStatus.AVAILABLE


@dataclass(frozen=True)
class AnalyticsOverview:
    """Everything the dashboard shows, computed in one pass."""

    trends: tuple[PeriodBucket, ...]
    trend_fit: Optional[TrendFit]
    period_comparison: Optional[PeriodComparison]
    ytd_comparison: Optional[YtdComparison]
    extremes: Optional[PeriodExtremes]
    category_summary: SectionResult[list[CategorySummary]]
    budget_alerts: SectionResult[list[BudgetProgress]]
    daily_activity: SectionResult[HeatmapMatrix]
