"""Analytics queries for trends, distributions, budgets and activity."""

from ledger_analytics.application.queries.analytics.analytics_overview_query import (
    AnalyticsOverviewQuery,
)
from ledger_analytics.application.queries.analytics.budget_progress_query import (
    BudgetProgressQuery,
)
from ledger_analytics.application.queries.analytics.category_summary_query import (
    CategorySummaryQuery,
)
from ledger_analytics.application.queries.analytics.daily_activity_query import (
    DailyActivityQuery,
)
from ledger_analytics.application.queries.analytics.trends_query import TrendsQuery

__all__ = [
    "AnalyticsOverviewQuery",
    "BudgetProgressQuery",
    "CategorySummaryQuery",
    "DailyActivityQuery",
    "TrendsQuery",
]
