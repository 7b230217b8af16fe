"""Daily activity series and its week-column heatmap layout."""

from __future__ import annotations

import math
from collections import defaultdict
from datetime import date, timedelta
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from ledger_analytics.application.dtos.analytics import (
    DailyActivityPoint,
    HeatmapCell,
    HeatmapMatrix,
)
from ledger_analytics.domain.ledger import Transaction, TransactionType
from ledger_analytics.domain.shared.exceptions import ErrorCode, ValidationError

DAYS_PER_WEEK = 7
PADDING_DATE = ""


def build_daily_activity(
    transactions: Iterable[Transaction],
    *,
    days: int,
    today: date,
    transaction_type: TransactionType = TransactionType.EXPENSE,
) -> list[DailyActivityPoint]:
    """Return one point per day for the trailing ``days`` days, ending ``today``."""
    if days < 1:
        raise ValidationError(
            f"Days must be at least 1, got {days}",
            ErrorCode.INVALID_PERIOD_COUNT,
        )

    first_day = today - timedelta(days=days - 1)
    totals: dict[date, Decimal] = defaultdict(Decimal)
    for txn in transactions:
        if txn.is_pending or txn.type != transaction_type:
            continue
        day = txn.occurred_at.date()
        if first_day <= day <= today:
            totals[day] += txn.amount

    return [
        DailyActivityPoint(date=day, value=totals.get(day, Decimal("0")))
        for day in (first_day + timedelta(days=i) for i in range(days))
    ]


def build_heatmap(
    points: Sequence[DailyActivityPoint],
    weeks: Optional[int] = None,
) -> HeatmapMatrix:
    """Lay an ascending daily series out as week columns of seven days.

    Column ``i`` holds points ``[7i, 7i + 7)``. Slots past the end of the
    series are padding cells, distinct from days whose value is zero.
    """
    needed = math.ceil(len(points) / DAYS_PER_WEEK)
    if weeks is None:
        weeks = needed
    elif weeks < needed:
        raise ValidationError(
            f"{len(points)} days need {needed} weeks, got {weeks}",
            ErrorCode.VALIDATION_ERROR,
        )

    max_value = max((p.value for p in points), default=Decimal("0"))
    scale = max(Decimal("1"), max_value)

    columns: list[tuple[HeatmapCell, ...]] = []
    for week in range(weeks):
        chunk = points[week * DAYS_PER_WEEK : (week + 1) * DAYS_PER_WEEK]
        cells = [
            HeatmapCell(
                date=p.date.isoformat(),
                value=p.value,
                intensity=float(p.value / scale),
            )
            for p in chunk
        ]
        while len(cells) < DAYS_PER_WEEK:
            cells.append(
                HeatmapCell(
                    date=PADDING_DATE,
                    value=Decimal("0"),
                    intensity=0.0,
                    is_padding=True,
                ),
            )
        columns.append(tuple(cells))

    return HeatmapMatrix(columns=tuple(columns), max_value=max_value)
