"""Fetch a bucketed income/expense trend series."""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING, Iterable, Optional

from ledger_analytics.application.dtos.analytics import PeriodBucket
from ledger_analytics.application.ports.analytics import (
    TransactionFilter,
    TransactionReadPort,
)
from ledger_analytics.application.services.analytics import (
    build_period_buckets,
    build_period_buckets_between,
    period_span,
)
from ledger_analytics.config import get_settings
from ledger_analytics.domain.ledger import Granularity, TransactionType
from ledger_analytics.domain.shared.time import today_utc

if TYPE_CHECKING:
    from ledger_analytics.application.factories import ReadPortFactory

logger = logging.getLogger(__name__)

TREND_TYPES = frozenset({TransactionType.INCOME, TransactionType.EXPENSE})


class TrendsQuery:
    """Return contiguous income/expense buckets for the trailing periods."""

    def __init__(self, transaction_read_port: TransactionReadPort):
        self._transactions = transaction_read_port

    @classmethod
    def from_factory(cls, factory: ReadPortFactory) -> TrendsQuery:
        return cls(transaction_read_port=factory.transaction_read_port())

    async def execute(
        self,
        granularity: Granularity = Granularity.MONTH,
        period_count: Optional[int] = None,
        *,
        account_ids: Optional[Iterable[str]] = None,
        category_ids: Optional[Iterable[str]] = None,
        today: Optional[date] = None,
    ) -> list[PeriodBucket]:
        if period_count is None:
            period_count = get_settings().default_period_count
        end = today or today_utc()

        date_from, date_to = period_span(granularity, period_count, end)
        transactions = await self._transactions.fetch_transactions(
            _trend_filter(date_from, date_to, account_ids, category_ids),
        )
        logger.debug(
            "Bucketing %d transactions into %d %s periods",
            len(transactions),
            period_count,
            granularity.value,
        )
        return build_period_buckets(transactions, granularity, period_count, end=end)

    async def execute_between(
        self,
        granularity: Granularity,
        date_from: date,
        date_to: date,
        *,
        account_ids: Optional[Iterable[str]] = None,
        category_ids: Optional[Iterable[str]] = None,
    ) -> list[PeriodBucket]:
        """Bucket an explicit inclusive date range instead of a trailing count."""
        transactions = await self._transactions.fetch_transactions(
            _trend_filter(date_from, date_to, account_ids, category_ids),
        )
        return build_period_buckets_between(transactions, granularity, date_from, date_to)


def _trend_filter(
    date_from: date,
    date_to: date,
    account_ids: Optional[Iterable[str]],
    category_ids: Optional[Iterable[str]],
) -> TransactionFilter:
    return TransactionFilter(
        date_from=date_from,
        date_to=date_to,
        account_ids=frozenset(account_ids or ()),
        category_ids=frozenset(category_ids or ()),
        transaction_types=TREND_TYPES,
        include_pending=False,
    )
