"""Pure analytics services.

Every function here is a transformation of already-fetched, in-memory
records: no I/O, no shared state.
"""

from ledger_analytics.application.services.analytics.activity_heatmap import (
    build_daily_activity,
    build_heatmap,
)
from ledger_analytics.application.services.analytics.budget_progress import (
    evaluate_budgets,
    select_alerts,
)
from ledger_analytics.application.services.analytics.category_distribution import (
    UNCATEGORIZED_LABEL,
    summarize_categories,
)
from ledger_analytics.application.services.analytics.period_bucketing import (
    build_period_buckets,
    build_period_buckets_between,
    period_span,
)
from ledger_analytics.application.services.analytics.period_comparison import (
    classify_change,
    compare_metric,
    compare_trailing_periods,
    compare_windows,
    find_extremes,
    percentage_change,
    split_trailing_windows,
)
from ledger_analytics.application.services.analytics.trend_fitting import (
    fit_series,
    fit_trend_line,
)
from ledger_analytics.application.services.analytics.ytd_comparison import (
    compare_year_to_date,
)

__all__ = [
    "UNCATEGORIZED_LABEL",
    "build_daily_activity",
    "build_heatmap",
    "build_period_buckets",
    "build_period_buckets_between",
    "classify_change",
    "compare_metric",
    "compare_trailing_periods",
    "compare_windows",
    "compare_year_to_date",
    "evaluate_budgets",
    "find_extremes",
    "fit_series",
    "fit_trend_line",
    "percentage_change",
    "period_span",
    "select_alerts",
    "split_trailing_windows",
    "summarize_categories",
]
