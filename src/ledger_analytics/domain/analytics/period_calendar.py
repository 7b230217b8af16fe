"""Canonical period keys and ISO week arithmetic.

Period keys sort lexicographically in chronological order within one
granularity:

- day:   ``YYYY-MM-DD``
- week:  ``YYYY-WW`` (ISO year and ISO week number)
- month: ``YYYY-MM``
- year:  ``YYYY``
"""

from __future__ import annotations

import re
from calendar import month_name
from datetime import date, datetime, timedelta

from ledger_analytics.domain.ledger import Granularity
from ledger_analytics.domain.shared.exceptions import (
    ErrorCode,
    InvalidPeriodKeyError,
    ValidationError,
)
from ledger_analytics.domain.shared.time import as_date

_KEY_PATTERNS = {
    Granularity.DAY: re.compile(r"^(\d{4})-(\d{2})-(\d{2})$"),
    Granularity.WEEK: re.compile(r"^(\d{4})-(\d{2})$"),
    Granularity.MONTH: re.compile(r"^(\d{4})-(\d{2})$"),
    Granularity.YEAR: re.compile(r"^(\d{4})$"),
}


def iso_week_range(iso_year: int, week: int) -> tuple[date, date]:
    """Return the Monday and Sunday of an ISO week.

    January 4th always falls in ISO week 1, so the week's Monday is found by
    stepping back from the anchor to its Monday and forward whole weeks.
    """
    if not 1 <= week <= _iso_weeks_in_year(iso_year):
        raise InvalidPeriodKeyError(f"{iso_year:04d}-{week:02d}", Granularity.WEEK.value)

    anchor = date(iso_year, 1, 4)
    anchor_dow = anchor.isoweekday()  # Monday=1 .. Sunday=7
    monday = anchor - timedelta(days=anchor_dow - 1) + timedelta(weeks=week - 1)
    return monday, monday + timedelta(days=6)


def _iso_weeks_in_year(iso_year: int) -> int:
    # December 28th is always in the last ISO week of its year
    return date(iso_year, 12, 28).isocalendar()[1]


def period_key(moment: date | datetime, granularity: Granularity) -> str:
    day = as_date(moment)
    if granularity == Granularity.DAY:
        return day.isoformat()
    if granularity == Granularity.WEEK:
        iso_year, iso_week, _ = day.isocalendar()
        return f"{iso_year:04d}-{iso_week:02d}"
    if granularity == Granularity.MONTH:
        return f"{day.year:04d}-{day.month:02d}"
    return f"{day.year:04d}"


def period_start(moment: date | datetime, granularity: Granularity) -> date:
    """Return the first calendar day of the period containing ``moment``."""
    day = as_date(moment)
    if granularity == Granularity.DAY:
        return day
    if granularity == Granularity.WEEK:
        return day - timedelta(days=day.isoweekday() - 1)
    if granularity == Granularity.MONTH:
        return day.replace(day=1)
    return date(day.year, 1, 1)


def next_period_start(start: date, granularity: Granularity) -> date:
    """Step one calendar unit forward from a period start."""
    if granularity == Granularity.DAY:
        return start + timedelta(days=1)
    if granularity == Granularity.WEEK:
        return start + timedelta(weeks=1)
    if granularity == Granularity.MONTH:
        if start.month == 12:
            return date(start.year + 1, 1, 1)
        return date(start.year, start.month + 1, 1)
    return date(start.year + 1, 1, 1)


def previous_period_start(start: date, granularity: Granularity) -> date:
    """Step one calendar unit back from a period start."""
    if granularity == Granularity.DAY:
        return start - timedelta(days=1)
    if granularity == Granularity.WEEK:
        return start - timedelta(weeks=1)
    if granularity == Granularity.MONTH:
        if start.month == 1:
            return date(start.year - 1, 12, 1)
        return date(start.year, start.month - 1, 1)
    return date(start.year - 1, 1, 1)


def period_end(start: date, granularity: Granularity) -> date:
    """Return the last calendar day of the period beginning at ``start``."""
    return next_period_start(start, granularity) - timedelta(days=1)


def parse_period_key(key: str, granularity: Granularity) -> date:
    """Return the first day of the period identified by ``key``."""
    match = _KEY_PATTERNS[granularity].match(key)
    if match is None:
        raise InvalidPeriodKeyError(key, granularity.value)

    parts = [int(p) for p in match.groups()]
    try:
        if granularity == Granularity.DAY:
            return date(parts[0], parts[1], parts[2])
        if granularity == Granularity.WEEK:
            return iso_week_range(parts[0], parts[1])[0]
        if granularity == Granularity.MONTH:
            return date(parts[0], parts[1], 1)
        return date(parts[0], 1, 1)
    except ValueError as e:
        raise InvalidPeriodKeyError(key, granularity.value) from e


def period_label(key: str, granularity: Granularity) -> str:
    start = parse_period_key(key, granularity)
    if granularity == Granularity.DAY:
        return f"{start.day} {month_name[start.month]} {start.year}"
    if granularity == Granularity.WEEK:
        iso_year, iso_week = (int(p) for p in key.split("-"))
        return f"Week {iso_week}, {iso_year}"
    if granularity == Granularity.MONTH:
        return f"{month_name[start.month]} {start.year}"
    return key


def trailing_period_starts(
    end: date | datetime,
    granularity: Granularity,
    count: int,
) -> list[date]:
    """Ascending starts of the ``count`` periods ending with the one containing ``end``."""
    if count < 1:
        raise ValidationError(
            f"Period count must be at least 1, got {count}",
            ErrorCode.INVALID_PERIOD_COUNT,
            {"count": count},
        )

    starts = [period_start(end, granularity)]
    while len(starts) < count:
        starts.append(previous_period_start(starts[-1], granularity))
    starts.reverse()
    return starts


def period_starts_between(
    start: date | datetime,
    end: date | datetime,
    granularity: Granularity,
) -> list[date]:
    """Ascending starts of every period touching the inclusive range ``[start, end]``."""
    first = period_start(start, granularity)
    last = period_start(end, granularity)
    if first > last:
        raise ValidationError(
            f"Date range start {as_date(start)} is after end {as_date(end)}",
            ErrorCode.INVALID_DATE_RANGE,
        )

    starts: list[date] = []
    current = first
    while current <= last:
        starts.append(current)
        current = next_period_start(current, granularity)
    return starts
