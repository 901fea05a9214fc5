"""Time utilities for timezone-aware UTC datetimes."""

from datetime import UTC, date, datetime


def utc_now() -> datetime:
    """Return a timezone-aware UTC datetime."""
    return datetime.now(UTC)


def utc_today() -> date:
    """Return the current calendar date in UTC, used to stamp export file names."""
    return utc_now().date()
