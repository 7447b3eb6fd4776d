from pydantic import BaseModel, Field


class CategoryIn(BaseModel):
    name: str = Field(min_length=1, max_length=50)

    class Config:
        str_strip_whitespace = True


class CategoryOut(BaseModel):
    id: int
    name: str
    habit_count: int = 0

    class Config:
        from_attributes = True
