from habit_tracker.crud.categories import create_category, delete_category, get_user_category, list_categories
from habit_tracker.crud.habits import create_habit, delete_habit, get_user_habit, list_habits, update_habit
from habit_tracker.crud.records import get_completed_habit_ids, get_habit_records, upsert_habit_record
from habit_tracker.crud.user import ensure_user, get_user_by_external_id

__all__ = [
    "ensure_user",
    "get_user_by_external_id",
    "create_category",
    "get_user_category",
    "list_categories",
    "delete_category",
    "create_habit",
    "get_user_habit",
    "list_habits",
    "update_habit",
    "delete_habit",
    "upsert_habit_record",
    "get_habit_records",
    "get_completed_habit_ids",
]
