import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Iterable, List, Optional, Set, Tuple

from habit_tracker.analytics.dates import InvalidDateError, days_apart, to_utc_day
from habit_tracker.analytics.records import completed_days
from habit_tracker.analytics.streaks import calculate_streaks

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HabitSummary:
    current_streak: int
    longest_streak: int
    completion_percent: int
    completed_days: int
    total_days: int
    skipped_records: int


def _window(start_date: Any, end_date: Any) -> Optional[Tuple[date, date]]:
    try:
        start = to_utc_day(start_date)
        end = to_utc_day(end_date)
    except InvalidDateError:
        logger.warning("Invalid completion window: start=%r end=%r", start_date, end_date)
        return None
    if start > end:
        logger.warning("Completion window starts after it ends: %s > %s", start, end)
        return None
    return start, end


def _completed_in_window(records: Iterable[Any], start: date, end: date) -> Set[date]:
    days, _ = completed_days(records)
    return {day for day in days if start <= day <= end}


def _round_percent(part: int, total: int) -> int:
    # round half up, exact for non-negative integers
    return (200 * part + total) // (2 * total)


def calculate_completion_percentage(records: Optional[Iterable[Any]], start_date: Any, end_date: Any) -> int:
    """
    Share of days in ``[start_date, end_date]`` with a completed record.

    Each UTC day counts once no matter how many records fall on it. Invalid
    input yields 0 instead of an exception.
    """
    if records is None:
        logger.warning("No habit records passed to completion percentage")
        return 0

    window = _window(start_date, end_date)
    if window is None:
        return 0
    start, end = window

    total_days = days_apart(start, end) + 1
    done = len(_completed_in_window(records, start, end))
    return _round_percent(done, total_days)


def completion_calendar(records: Optional[Iterable[Any]], start_date: Any, end_date: Any) -> List[Tuple[date, bool]]:
    """One ``(day, completed)`` entry per day of the inclusive window."""
    window = _window(start_date, end_date)
    if records is None or window is None:
        return []
    start, end = window

    done = _completed_in_window(records, start, end)
    total_days = days_apart(start, end) + 1
    return [(day, day in done) for day in (start + timedelta(days=i) for i in range(total_days))]


def summarize_habit(
    records: Optional[Iterable[Any]],
    start_date: Any,
    end_date: Any,
    today: Optional[date] = None,
) -> HabitSummary:
    records = list(records or [])
    streaks = calculate_streaks(records, today=today)

    window = _window(start_date, end_date)
    if window is None:
        done, total_days = 0, 0
    else:
        start, end = window
        done = len(_completed_in_window(records, start, end))
        total_days = days_apart(start, end) + 1

    return HabitSummary(
        current_streak=streaks.current_streak,
        longest_streak=streaks.longest_streak,
        completion_percent=_round_percent(done, total_days) if total_days else 0,
        completed_days=done,
        total_days=total_days,
        skipped_records=streaks.skipped_records,
    )
