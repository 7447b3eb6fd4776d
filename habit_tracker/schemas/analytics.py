from datetime import date

from pydantic import BaseModel


class HabitAnalyticsOut(BaseModel):
    habit_id: int
    start_date: date
    end_date: date
    current_streak: int
    longest_streak: int
    completion_percent: int
    completed_days: int
    total_days: int
    skipped_records: int


class HistoryDayOut(BaseModel):
    day: date
    completed: bool


class HabitHistoryOut(BaseModel):
    habit_id: int
    start_date: date
    end_date: date
    days: list[HistoryDayOut]
