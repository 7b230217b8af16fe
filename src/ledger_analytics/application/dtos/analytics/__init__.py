"""Analytics DTOs for charts, comparisons and alerts."""

from ledger_analytics.application.dtos.analytics.analytics_dto import (
    BudgetProgress,
    CategorySummary,
    ChangeOutcome,
    DailyActivityPoint,
    HeatmapCell,
    HeatmapMatrix,
    MetricComparison,
    PeriodBucket,
    PeriodComparison,
    PeriodExtremes,
    TrendDirection,
    TrendFit,
    YtdComparison,
)
from ledger_analytics.application.dtos.analytics.overview_dto import (
    AnalyticsOverview,
    SectionResult,
    SectionStatus,
)

__all__ = [
    "AnalyticsOverview",
    "BudgetProgress",
    "CategorySummary",
    "ChangeOutcome",
    "DailyActivityPoint",
    "HeatmapCell",
    "HeatmapMatrix",
    "MetricComparison",
    "PeriodBucket",
    "PeriodComparison",
    "PeriodExtremes",
    "SectionResult",
    "SectionStatus",
    "TrendDirection",
    "TrendFit",
    "YtdComparison",
]
