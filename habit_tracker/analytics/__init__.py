"""Habit analytics: streaks and completion rates over a habit's history."""

from habit_tracker.analytics.completion import (
    HabitSummary,
    calculate_completion_percentage,
    completion_calendar,
    summarize_habit,
)
from habit_tracker.analytics.dates import InvalidDateError, days_apart, to_utc_day, today_utc
from habit_tracker.analytics.streaks import StreakResult, calculate_streaks

__all__ = [
    "InvalidDateError",
    "to_utc_day",
    "days_apart",
    "today_utc",
    "StreakResult",
    "calculate_streaks",
    "HabitSummary",
    "calculate_completion_percentage",
    "completion_calendar",
    "summarize_habit",
]
