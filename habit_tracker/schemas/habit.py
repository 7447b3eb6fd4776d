from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field


class HabitIn(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    frequency: Literal["daily", "weekly"]
    category_id: Optional[int] = None

    class Config:
        str_strip_whitespace = True


class HabitOut(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    frequency: str
    category_id: Optional[int] = None
    created_at: datetime
    completed_today: bool = False

    class Config:
        from_attributes = True
