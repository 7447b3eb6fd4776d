from datetime import date, datetime

from pydantic import BaseModel


class HabitRecordIn(BaseModel):
    date: datetime
    completed: bool


class HabitRecordOut(BaseModel):
    habit_id: int
    day: date
    completed: bool
