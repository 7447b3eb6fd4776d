import logging
from typing import Optional

from sqlalchemy import and_, delete, select
from sqlalchemy.orm import Session

from habit_tracker.models import Habit, HabitRecord, User

logger = logging.getLogger(__name__)


def _clean_description(description: Optional[str]) -> Optional[str]:
    if description is None:
        return None
    return description.strip() or None


def create_habit(
    db: Session,
    user: User,
    name: str,
    frequency: str,
    description: Optional[str] = None,
    category_id: Optional[int] = None,
) -> Habit:
    habit = Habit(
        user_id=user.id,
        name=name,
        description=_clean_description(description),
        frequency=frequency,
        category_id=category_id,
    )
    db.add(habit)
    db.commit()
    db.refresh(habit)
    logger.info("Habit %s (%s) created for user %s", habit.id, name, user.external_id)
    return habit


def get_user_habit(db: Session, user: User, habit_id: int) -> Optional[Habit]:
    return db.scalar(select(Habit).where(and_(Habit.id == habit_id, Habit.user_id == user.id)))


def list_habits(
    db: Session,
    user: User,
    category_id: Optional[int] = None,
    uncategorized: bool = False,
) -> list[Habit]:
    query = select(Habit).where(Habit.user_id == user.id)
    if uncategorized:
        query = query.where(Habit.category_id.is_(None))
    elif category_id is not None:
        query = query.where(Habit.category_id == category_id)
    return list(db.scalars(query.order_by(Habit.created_at, Habit.id)))


def update_habit(
    db: Session,
    habit: Habit,
    name: str,
    frequency: str,
    description: Optional[str] = None,
    category_id: Optional[int] = None,
) -> Habit:
    habit.name = name
    habit.description = _clean_description(description)
    habit.frequency = frequency
    habit.category_id = category_id
    db.add(habit)
    db.commit()
    db.refresh(habit)
    logger.info("Habit %s updated", habit.id)
    return habit


def delete_habit(db: Session, habit: Habit) -> None:
    habit_id, name = habit.id, habit.name
    db.execute(delete(HabitRecord).where(HabitRecord.habit_id == habit_id))
    db.delete(habit)
    db.commit()
    logger.info("Habit %s (%s) and its records deleted", habit_id, name)
