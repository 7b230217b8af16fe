"""Time utilities for the domain layer."""

from datetime import date, datetime, timezone


def today_utc() -> date:
    """Return current date in UTC."""
    return datetime.now(tz=timezone.utc).date()


def ensure_tz_aware(dt: datetime) -> datetime:
    """Ensure datetime is timezone-aware (UTC if naive)."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def as_date(moment: date | datetime) -> date:
    """Return the calendar date of a date or datetime."""
    if isinstance(moment, datetime):
        return ensure_tz_aware(moment).date()
    return moment
