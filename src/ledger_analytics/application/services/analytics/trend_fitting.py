"""Ordinary least-squares trend line over an ordered window."""

from __future__ import annotations

from decimal import Decimal
from typing import Optional, Sequence, Union

from ledger_analytics.application.dtos.analytics import TrendDirection, TrendFit

Number = Union[Decimal, int, float]

DEFAULT_FLAT_EPSILON = Decimal("1e-9")


def fit_trend_line(
    points: Sequence[tuple[int, Number]],
    *,
    flat_epsilon: Decimal = DEFAULT_FLAT_EPSILON,
) -> Optional[TrendFit]:
    """Fit ``value = slope * index + intercept``.

    Returns None when fewer than two points are given or the x values are
    degenerate (zero denominator); a missing trend is never reported as a
    flat one.
    """
    n = len(points)
    if n < 2:
        return None

    xs = [Decimal(x) for x, _ in points]
    ys = [_to_decimal(y) for _, y in points]

    sum_x = sum(xs, Decimal("0"))
    sum_y = sum(ys, Decimal("0"))
    sum_xy = sum((x * y for x, y in zip(xs, ys)), Decimal("0"))
    sum_xx = sum((x * x for x in xs), Decimal("0"))

    denominator = n * sum_xx - sum_x * sum_x
    if denominator == 0:
        return None

    slope = (n * sum_xy - sum_x * sum_y) / denominator
    intercept = (sum_y - slope * sum_x) / n

    mean = sum_y / n
    slope_pct_of_mean = slope / abs(mean) * 100 if mean != 0 else None

    return TrendFit(
        slope=slope,
        intercept=intercept,
        direction=_direction(slope, flat_epsilon),
        point_count=n,
        slope_pct_of_mean=slope_pct_of_mean,
        fitted_values=tuple(slope * x + intercept for x in xs),
    )


def fit_series(
    values: Sequence[Number],
    *,
    flat_epsilon: Decimal = DEFAULT_FLAT_EPSILON,
) -> Optional[TrendFit]:
    """Fit a trend over values indexed 0..n-1."""
    return fit_trend_line(list(enumerate(values)), flat_epsilon=flat_epsilon)


def _direction(slope: Decimal, flat_epsilon: Decimal) -> TrendDirection:
    if abs(slope) <= flat_epsilon:
        return TrendDirection.FLAT
    return TrendDirection.UP if slope > 0 else TrendDirection.DOWN


def _to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))
