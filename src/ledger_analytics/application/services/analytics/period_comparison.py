"""Period-over-period comparison of aggregated windows."""

from __future__ import annotations

from decimal import Decimal
from typing import Optional, Sequence, TypeVar, Union

from ledger_analytics.application.dtos.analytics import (
    ChangeOutcome,
    MetricComparison,
    PeriodBucket,
    PeriodComparison,
    PeriodExtremes,
)
from ledger_analytics.domain.shared.exceptions import ErrorCode, ValidationError

Number = Union[Decimal, int, float]
T = TypeVar("T")

PERCENT_QUANTUM = Decimal("0.1")


def percentage_change(current: Number, previous: Number) -> Optional[Decimal]:
    """Return ``(current - previous) / |previous| * 100``, or None when previous is zero."""
    curr = _to_decimal(current)
    prev = _to_decimal(previous)
    if prev == 0:
        return None
    return ((curr - prev) / abs(prev) * 100).quantize(PERCENT_QUANTUM)


def classify_change(percentage: Optional[Decimal], invert: bool = False) -> ChangeOutcome:
    """Tag a change as favorable or unfavorable.

    A non-negative change is favorable; ``invert`` flips that for metrics
    where going down is good (expenses).
    """
    if percentage is None:
        return ChangeOutcome.UNAVAILABLE
    went_up = percentage >= 0
    favorable = not went_up if invert else went_up
    return ChangeOutcome.FAVORABLE if favorable else ChangeOutcome.UNFAVORABLE


def compare_metric(current: Number, previous: Number, invert: bool = False) -> MetricComparison:
    curr = _to_decimal(current)
    prev = _to_decimal(previous)
    percentage = percentage_change(curr, prev)
    return MetricComparison(
        current=curr,
        previous=prev,
        delta=curr - prev,
        percentage=percentage,
        outcome=classify_change(percentage, invert),
    )


def compare_windows(
    current: Sequence[Number],
    previous: Sequence[Number],
    invert: bool = False,
) -> Optional[MetricComparison]:
    """Compare the sums of two equal-length windows.

    Returns None when either window is empty.
    """
    if len(current) != len(previous):
        raise ValidationError(
            f"Windows must have equal length, got {len(current)} and {len(previous)}",
            ErrorCode.WINDOW_LENGTH_MISMATCH,
            {"current": len(current), "previous": len(previous)},
        )
    if not current:
        return None

    return compare_metric(
        sum((_to_decimal(v) for v in current), Decimal("0")),
        sum((_to_decimal(v) for v in previous), Decimal("0")),
        invert,
    )


def split_trailing_windows(values: Sequence[T], window: int) -> tuple[list[T], list[T]]:
    """Split off the trailing ``window`` values and the ``window`` values before them.

    When the series is too short for two full windows, both windows shrink
    to half of what is available so they stay equal in length.
    """
    if window < 1:
        raise ValidationError(
            f"Window must be at least 1, got {window}",
            ErrorCode.INVALID_PERIOD_COUNT,
        )
    size = min(window, len(values) // 2)
    if size == 0:
        return [], []
    current = list(values[len(values) - size :])
    previous = list(values[len(values) - 2 * size : len(values) - size])
    return current, previous


def compare_trailing_periods(
    buckets: Sequence[PeriodBucket],
    window: int,
) -> Optional[PeriodComparison]:
    """Compare the trailing ``window`` buckets with the ones just before them."""
    current, previous = split_trailing_windows(buckets, window)
    if not current:
        return None

    income = compare_windows([b.income for b in current], [b.income for b in previous])
    expenses = compare_windows(
        [b.expenses for b in current],
        [b.expenses for b in previous],
        invert=True,
    )
    balance = compare_windows([b.balance for b in current], [b.balance for b in previous])
    if income is None or expenses is None or balance is None:
        return None
    return PeriodComparison(
        window=len(current),
        income=income,
        expenses=expenses,
        balance=balance,
    )


def find_extremes(buckets: Sequence[PeriodBucket]) -> Optional[PeriodExtremes]:
    """Return the best and worst bucket by balance; earliest wins ties."""
    if not buckets:
        return None
    best = worst = buckets[0]
    for bucket in buckets[1:]:
        if bucket.balance > best.balance:
            best = bucket
        if bucket.balance < worst.balance:
            worst = bucket
    return PeriodExtremes(best=best, worst=worst)


def _to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))
