from habit_tracker.models.base import Base
from habit_tracker.models.category import Category
from habit_tracker.models.habit import Habit
from habit_tracker.models.habit_record import HabitRecord
from habit_tracker.models.user import User

__all__ = [
    "Base",
    "User",
    "Category",
    "Habit",
    "HabitRecord",
]
