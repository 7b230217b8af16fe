"""Dashboard overview: every analytics section in one aggregation pass.

The trend series is the primary section. If its fetch fails the whole
overview fails with ``AnalyticsDataUnavailableError``. Category summary,
budget alerts and daily activity are fetched concurrently with it and fail
independently: each fetch failure is logged and reported as an unavailable
section while the rest of the overview proceeds. Caller errors
(``DomainException``) are never downgraded to an unavailable section.

No load outlives ``execute``: when the overview fails or is cancelled, the
loads still running are cancelled and awaited before the error propagates.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import date
from typing import TYPE_CHECKING, Awaitable, Optional, TypeVar

from ledger_analytics.application.dtos.analytics import (
    AnalyticsOverview,
    BudgetProgress,
    HeatmapMatrix,
    SectionResult,
)
from ledger_analytics.application.ports.analytics import (
    BudgetReadPort,
    TransactionFilter,
    TransactionReadPort,
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
from ledger_analytics.application.queries.analytics.trends_query import TREND_TYPES
from ledger_analytics.application.services.analytics import (
    build_heatmap,
    build_period_buckets,
    compare_trailing_periods,
    compare_year_to_date,
    find_extremes,
    fit_series,
    period_span,
    select_alerts,
)
from ledger_analytics.config import get_settings
from ledger_analytics.domain.analytics import period_end, period_start
from ledger_analytics.domain.ledger import Granularity, Transaction, TransactionType
from ledger_analytics.domain.shared.exceptions import (
    AnalyticsDataUnavailableError,
    DomainException,
)
from ledger_analytics.domain.shared.time import today_utc

if TYPE_CHECKING:
    from ledger_analytics.application.factories import ReadPortFactory

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AnalyticsOverviewQuery:
    """Build the full analytics overview with per-section failure isolation."""

    def __init__(
        self,
        transaction_read_port: TransactionReadPort,
        budget_read_port: BudgetReadPort,
    ):
        self._transactions = transaction_read_port
        self._categories = CategorySummaryQuery(transaction_read_port)
        self._budgets = BudgetProgressQuery(budget_read_port, transaction_read_port)
        self._daily = DailyActivityQuery(transaction_read_port)

    @classmethod
    def from_factory(cls, factory: ReadPortFactory) -> AnalyticsOverviewQuery:
        return cls(
            transaction_read_port=factory.transaction_read_port(),
            budget_read_port=factory.budget_read_port(),
        )

    async def execute(  # NOQA: PLR0913
        self,
        granularity: Granularity = Granularity.MONTH,
        period_count: Optional[int] = None,
        *,
        comparison_window: Optional[int] = None,
        category_date_from: Optional[date] = None,
        category_date_to: Optional[date] = None,
        category_type: TransactionType = TransactionType.EXPENSE,
        budget_alert_count: Optional[int] = None,
        heatmap_days: Optional[int] = None,
        today: Optional[date] = None,
    ) -> AnalyticsOverview:
        settings = get_settings()
        if period_count is None:
            period_count = settings.default_period_count
        if comparison_window is None:
            comparison_window = settings.comparison_window
        if budget_alert_count is None:
            budget_alert_count = settings.budget_alert_count
        if heatmap_days is None:
            heatmap_days = settings.heatmap_days
        day = today or today_utc()

        # Category summary defaults to the current month
        if category_date_from is None and category_date_to is None:
            category_date_from = period_start(day, Granularity.MONTH)
            category_date_to = period_end(category_date_from, Granularity.MONTH)

        primary = asyncio.create_task(
            self._load_trend_transactions(granularity, period_count, day),
        )
        sections = [
            asyncio.create_task(
                _section(
                    "category_summary",
                    self._categories.execute(category_date_from, category_date_to, category_type),
                ),
            ),
            asyncio.create_task(
                _section("budget_alerts", self._load_budget_alerts(budget_alert_count, day)),
            ),
            asyncio.create_task(
                _section("daily_activity", self._load_heatmap(heatmap_days, day)),
            ),
        ]
        try:
            transactions = await primary
            categories, alerts, activity = await asyncio.gather(*sections)
        except BaseException:
            await _cancel_all([primary, *sections])
            raise

        buckets = build_period_buckets(transactions, granularity, period_count, end=day)
        monthly = build_period_buckets(
            transactions,
            Granularity.MONTH,
            12 + day.month,
            end=day,
        )

        return AnalyticsOverview(
            trends=tuple(buckets),
            trend_fit=fit_series(
                [b.balance for b in buckets],
                flat_epsilon=settings.trend_flat_epsilon,
            ),
            period_comparison=compare_trailing_periods(buckets, comparison_window),
            ytd_comparison=compare_year_to_date(monthly, day),
            extremes=find_extremes(buckets),
            category_summary=categories,
            budget_alerts=alerts,
            daily_activity=activity,
        )

    async def _load_trend_transactions(
        self,
        granularity: Granularity,
        period_count: int,
        day: date,
    ) -> list[Transaction]:
        # One fetch covers both the trend window and January of last year (YTD)
        trend_from, date_to = period_span(granularity, period_count, day)
        date_from = min(trend_from, date(day.year - 1, 1, 1))
        try:
            return await self._transactions.fetch_transactions(
                TransactionFilter(
                    date_from=date_from,
                    date_to=date_to,
                    transaction_types=TREND_TYPES,
                    include_pending=False,
                ),
            )
        except DomainException:
            raise
        except Exception as e:
            logger.exception("Trend fetch failed: %s", e)
            raise AnalyticsDataUnavailableError("trends", str(e) or type(e).__name__) from e

    async def _load_budget_alerts(self, top_n: int, day: date) -> list[BudgetProgress]:
        return select_alerts(await self._budgets.execute(today=day), top_n)

    async def _load_heatmap(self, days: int, day: date) -> HeatmapMatrix:
        return build_heatmap(await self._daily.execute(days, today=day))


async def _section(name: str, loader: Awaitable[T]) -> SectionResult[T]:
    try:
        return SectionResult.available(await loader)
    except DomainException:
        raise
    except Exception as e:  # NOQA: BLE001
        logger.warning("Overview section %s unavailable: %s", name, e)
        return SectionResult.unavailable(str(e) or type(e).__name__)


async def _cancel_all(tasks: list[asyncio.Task]) -> None:
    for task in tasks:
        if not task.done():
            task.cancel()
    await asyncio.gather(*tasks, return_exceptions=True)
