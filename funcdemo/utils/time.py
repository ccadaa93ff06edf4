"""
Date and time helpers for timezone-aware instants.

Wall-clock time is only read when the caller supplies no reference
instant; demos always pass one so their output is deterministic.
"""

from datetime import date, datetime, timedelta, timezone
from typing import Optional, Union
from zoneinfo import ZoneInfo

from ..errors import InvalidInputError

WEEKDAYS = (
    "MONDAY", "TUESDAY", "WEDNESDAY", "THURSDAY", "FRIDAY", "SATURDAY", "SUNDAY",
)


def get_reference_time(reference: Optional[Union[datetime, str]] = None) -> datetime:
    """
    Resolve the instant a calculation is anchored to.

    Args:
        reference: Aware datetime, ISO8601 string with offset, or None

    Returns:
        Aware UTC datetime, falling back to wall-clock time if reference is None
    """
    if reference is None:
        return datetime.now(timezone.utc)

    if isinstance(reference, str):
        try:
            reference = datetime.fromisoformat(reference)
        except ValueError as e:
            raise InvalidInputError(
                f"Not an ISO8601 timestamp: {reference!r}",
                value=reference,
                expected="ISO8601 timestamp"
            ) from e

    return ensure_aware(reference).astimezone(timezone.utc)


def ensure_aware(value: datetime) -> datetime:
    """Reject naive datetimes."""
    if not isinstance(value, datetime):
        raise InvalidInputError(
            f"Expected datetime, got {type(value).__name__}",
            value=value,
            expected="datetime"
        )
    if value.tzinfo is None or value.utcoffset() is None:
        raise InvalidInputError(
            "Datetime must carry a timezone",
            value=value,
            expected="timezone-aware datetime"
        )
    return value


def format_instant(value: datetime) -> str:
    """
    Format an instant for output.

    Args:
        value: Aware datetime

    Returns:
        ISO8601 formatted string
    """
    return ensure_aware(value).isoformat()


def plus_days(value: datetime, days: int) -> datetime:
    return ensure_aware(value) + timedelta(days=days)


def days_between(start: Union[date, datetime], end: Union[date, datetime]) -> int:
    """
    Whole calendar days from ``start`` to ``end``.

    Negative when ``end`` is before ``start``. Datetimes are compared by
    their UTC calendar date.
    """
    if isinstance(start, datetime):
        start = ensure_aware(start).astimezone(timezone.utc).date()
    if isinstance(end, datetime):
        end = ensure_aware(end).astimezone(timezone.utc).date()
    return (end - start).days


def day_of_week(value: Union[date, datetime]) -> str:
    """Upper-case English weekday name, e.g. TUESDAY."""
    return WEEKDAYS[value.weekday()]


def to_zone(value: datetime, zone_name: str) -> datetime:
    """Convert an instant to the wall-clock time of an IANA zone."""
    return ensure_aware(value).astimezone(ZoneInfo(zone_name))
