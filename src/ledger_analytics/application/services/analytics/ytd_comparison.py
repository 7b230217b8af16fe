"""Year-to-date comparison over a monthly trend series.

Both years are cut to the months elapsed in the current year, so a March
comparison sums January to March of each year even when full history is
present. Months missing from the prior year are not fabricated: a ledger
that starts mid-year understates the prior-year totals.
"""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ledger_analytics.application.dtos.analytics import PeriodBucket, YtdComparison
from ledger_analytics.application.services.analytics.period_comparison import (
    compare_metric,
)
from ledger_analytics.domain.analytics import parse_period_key
from ledger_analytics.domain.ledger import Granularity

logger = logging.getLogger(__name__)


def compare_year_to_date(
    buckets: Sequence[PeriodBucket],
    today: date,
) -> Optional[YtdComparison]:
    if not buckets:
        return None

    current_year = today.year
    previous_year = current_year - 1
    months_elapsed = today.month

    ordered = sorted(
        ((parse_period_key(b.period_key, Granularity.MONTH), b) for b in buckets),
        key=lambda item: item[0],
    )
    current_slice = [b for start, b in ordered if start.year == current_year][:months_elapsed]
    previous_slice = [b for start, b in ordered if start.year == previous_year][:months_elapsed]

    if len(previous_slice) < months_elapsed:
        logger.debug(
            "YTD prior year %d has %d of %d months; totals are partial",
            previous_year,
            len(previous_slice),
            months_elapsed,
        )

    current_income = _total(b.income for b in current_slice)
    current_expenses = _total(b.expenses for b in current_slice)
    previous_income = _total(b.income for b in previous_slice)
    previous_expenses = _total(b.expenses for b in previous_slice)

    return YtdComparison(
        current_year=current_year,
        previous_year=previous_year,
        months_elapsed=months_elapsed,
        income=compare_metric(current_income, previous_income),
        expenses=compare_metric(current_expenses, previous_expenses, invert=True),
        balance=compare_metric(
            current_income - current_expenses,
            previous_income - previous_expenses,
        ),
    )


def _total(values) -> Decimal:
    return sum(values, Decimal("0"))
