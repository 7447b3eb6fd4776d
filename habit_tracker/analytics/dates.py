"""
UTC day normalization.

Every completion is compared at calendar-day granularity in UTC, so the
time of day and the client's local timezone never affect streak or
percentage results.
"""

from datetime import date, datetime, timezone
from typing import Any, Optional


class InvalidDateError(ValueError):
    """Raised when a value cannot be interpreted as a calendar day."""


def to_utc_day(value: Any) -> date:
    """
    Collapse a timestamp to its UTC calendar day.

    Args:
        value: ``datetime`` (naive values are taken as UTC), ``date`` or an
               ISO-8601 string.

    Returns:
        The UTC calendar day.

    Raises:
        InvalidDateError: if the value is not a real date.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()

    if isinstance(value, date):
        return value

    if isinstance(value, str):
        raw = value.strip()
        if raw.endswith(("Z", "z")):
            raw = raw[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(raw)
        except ValueError as exc:
            raise InvalidDateError(f"unparseable date: {value!r}") from exc
        return to_utc_day(parsed)

    raise InvalidDateError(f"not a date: {value!r}")


def days_apart(day_a: date, day_b: date) -> int:
    """Absolute number of whole days between two UTC days."""
    return abs(day_a.toordinal() - day_b.toordinal())


def today_utc(now: Optional[datetime] = None) -> date:
    if now is None:
        now = datetime.now(timezone.utc)
    return to_utc_day(now)
