from habit_tracker.schemas.analytics import HabitAnalyticsOut, HabitHistoryOut, HistoryDayOut
from habit_tracker.schemas.category import CategoryIn, CategoryOut
from habit_tracker.schemas.habit import HabitIn, HabitOut
from habit_tracker.schemas.record import HabitRecordIn, HabitRecordOut

__all__ = [
    "HabitIn",
    "HabitOut",
    "CategoryIn",
    "CategoryOut",
    "HabitRecordIn",
    "HabitRecordOut",
    "HabitAnalyticsOut",
    "HistoryDayOut",
    "HabitHistoryOut",
]
