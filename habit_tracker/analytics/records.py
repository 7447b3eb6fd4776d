import logging
from collections.abc import Mapping
from datetime import date
from typing import Any, Iterable, List, Tuple

from habit_tracker.analytics.dates import InvalidDateError, to_utc_day

logger = logging.getLogger(__name__)


def record_fields(record: Any) -> Tuple[Any, bool]:
    """
    Return ``(date, completed)`` from an ORM row, named tuple or mapping.

    Only a real ``True`` marks a record completed; strings such as ``"false"``
    are not coerced.
    """
    if isinstance(record, Mapping):
        return record.get("date"), record.get("completed") is True
    return getattr(record, "date", None), getattr(record, "completed", False) is True


def completed_days(records: Iterable[Any]) -> Tuple[List[date], int]:
    """
    Normalize the completed records of one habit to UTC days.

    Incomplete records are ignored. Completed records whose date cannot be
    normalized are dropped and counted.

    Returns:
        ``(days, skipped)`` where ``days`` keeps input order and may contain
        duplicates.
    """
    days: List[date] = []
    skipped = 0
    for record in records:
        raw_date, completed = record_fields(record)
        if not completed:
            continue
        try:
            days.append(to_utc_day(raw_date))
        except InvalidDateError:
            skipped += 1
            logger.warning("Skipping habit record with invalid date: %r", raw_date)
    return days, skipped
