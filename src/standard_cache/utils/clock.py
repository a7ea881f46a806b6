"""Time helpers used for cache expiration."""

from collections.abc import Callable
from datetime import MAXYEAR, datetime, timedelta, timezone

Clock = Callable[[], datetime]

# Furthest instants a datetime can hold; expirations beyond them are clamped
MAX_UTC = datetime.max.replace(tzinfo=timezone.utc)
MIN_UTC = datetime.min.replace(tzinfo=timezone.utc)


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def to_utc(value: datetime) -> datetime:
    """Normalise a datetime to aware UTC.

    Naive datetimes are interpreted as local time. Values whose UTC
    equivalent falls outside the datetime range are clamped to
    MAX_UTC or MIN_UTC.
    """
    try:
        return value.astimezone(timezone.utc)
    except OverflowError:
        return MAX_UTC if value.year == MAXYEAR else MIN_UTC


def add_period(start: datetime, period: timedelta) -> datetime:
    """Return start + period, clamped to MAX_UTC or MIN_UTC on overflow."""
    try:
        return start + period
    except OverflowError:
        return MAX_UTC if period > timedelta(0) else MIN_UTC
