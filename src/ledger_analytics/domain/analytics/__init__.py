"""Calendar arithmetic shared by the analytics services."""

from ledger_analytics.domain.analytics.period_calendar import (
    iso_week_range,
    next_period_start,
    parse_period_key,
    period_end,
    period_key,
    period_label,
    period_start,
    period_starts_between,
    previous_period_start,
    trailing_period_starts,
)

__all__ = [
    "iso_week_range",
    "next_period_start",
    "parse_period_key",
    "period_end",
    "period_key",
    "period_label",
    "period_start",
    "period_starts_between",
    "previous_period_start",
    "trailing_period_starts",
]
