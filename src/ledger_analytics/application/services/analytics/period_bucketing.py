"""Group transactions into contiguous, zero-filled period buckets.

The expected periods are enumerated by walking the calendar, not derived
from the data, so a span with no transactions still yields one bucket per
period. Regression and window comparisons index into the result by
position and rely on that fixed cadence.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date, datetime
from decimal import Decimal
from typing import Iterable

from ledger_analytics.application.dtos.analytics import PeriodBucket
from ledger_analytics.domain.analytics import (
    period_end,
    period_key,
    period_label,
    period_starts_between,
    trailing_period_starts,
)
from ledger_analytics.domain.ledger import Granularity, Transaction

logger = logging.getLogger(__name__)


def period_span(
    granularity: Granularity,
    period_count: int,
    end: date | datetime,
) -> tuple[date, date]:
    """Return the first and last calendar day of the trailing window."""
    starts = trailing_period_starts(end, granularity, period_count)
    return starts[0], period_end(starts[-1], granularity)


def build_period_buckets(
    transactions: Iterable[Transaction],
    granularity: Granularity,
    period_count: int,
    *,
    end: date | datetime,
) -> list[PeriodBucket]:
    """Bucket the trailing ``period_count`` periods ending with the one containing ``end``."""
    starts = trailing_period_starts(end, granularity, period_count)
    return _fill_buckets(transactions, granularity, starts)


def build_period_buckets_between(
    transactions: Iterable[Transaction],
    granularity: Granularity,
    start: date | datetime,
    end: date | datetime,
) -> list[PeriodBucket]:
    """Bucket every period touching the inclusive range ``[start, end]``."""
    starts = period_starts_between(start, end, granularity)
    return _fill_buckets(transactions, granularity, starts)


def _fill_buckets(
    transactions: Iterable[Transaction],
    granularity: Granularity,
    starts: list[date],
) -> list[PeriodBucket]:
    income: dict[str, Decimal] = defaultdict(Decimal)
    expenses: dict[str, Decimal] = defaultdict(Decimal)

    for txn in transactions:
        if txn.is_pending:
            continue
        key = period_key(txn.occurred_at, granularity)
        if txn.is_income:
            income[key] += txn.amount
        elif txn.is_expense:
            expenses[key] += txn.amount

    buckets: list[PeriodBucket] = []
    for start in starts:
        key = period_key(start, granularity)
        buckets.append(
            PeriodBucket(
                period_key=key,
                period_label=period_label(key, granularity),
                income=income.get(key, Decimal("0")),
                expenses=expenses.get(key, Decimal("0")),
            ),
        )

    logger.debug(
        "Built %d %s buckets (%s .. %s)",
        len(buckets),
        granularity.value,
        buckets[0].period_key if buckets else "-",
        buckets[-1].period_key if buckets else "-",
    )
    return buckets
