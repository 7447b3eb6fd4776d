"""
Streak calculation for a single habit.

A streak is a run of consecutive UTC calendar days with a completed record.
The current streak must end today or yesterday to still count as alive.
"""

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Iterable, Optional

from habit_tracker.analytics.dates import InvalidDateError, days_apart, to_utc_day, today_utc
from habit_tracker.analytics.records import completed_days

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StreakResult:
    current_streak: int = 0
    longest_streak: int = 0
    skipped_records: int = 0


def _longest_run(days: list[date]) -> int:
    longest = 0
    run = 0
    previous: Optional[date] = None
    for day in days:
        if previous is None:
            run = 1
        elif day == previous:
            pass
        elif days_apart(previous, day) == 1:
            run += 1
        else:
            run = 1
        longest = max(longest, run)
        previous = day
    return longest


def _current_run(days: list[date], today: date) -> int:
    last = days[-1]
    yesterday = today - timedelta(days=1)
    if last not in (today, yesterday):
        return 0

    seen = set(days)
    streak = 1
    expected = last - timedelta(days=1)
    while expected in seen:
        streak += 1
        expected -= timedelta(days=1)
    return streak


def _anchor_day(today: Any) -> date:
    if today is None:
        return today_utc()
    try:
        return to_utc_day(today)
    except InvalidDateError:
        logger.warning("Invalid streak anchor %r, using the system clock", today)
        return today_utc()


def calculate_streaks(records: Optional[Iterable[Any]], today: Optional[date] = None) -> StreakResult:
    """
    Calculate the current and longest streak of one habit.

    Args:
        records: the habit's ``{date, completed}`` records, in any order.
                 Records of other habits must be filtered out by the caller.
        today: UTC day the current streak is anchored on. Defaults to the
               system clock, which is also used when the value is not a date.

    Returns:
        StreakResult. Completed records with an unparseable date are skipped
        and reported in ``skipped_records``.
    """
    if not records:
        return StreakResult()

    days, skipped = completed_days(records)
    if not days:
        return StreakResult(skipped_records=skipped)

    days.sort()
    today = _anchor_day(today)

    return StreakResult(
        current_streak=_current_run(days, today),
        longest_streak=_longest_run(days),
        skipped_records=skipped,
    )
