import logging
from typing import Optional

from sqlalchemy import and_, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from habit_tracker.models import Category, Habit, User

logger = logging.getLogger(__name__)


def get_user_category(db: Session, user: User, category_id: int) -> Optional[Category]:
    return db.scalar(select(Category).where(and_(Category.id == category_id, Category.user_id == user.id)))


def _name_taken(db: Session, user_id: int, name: str) -> bool:
    return db.scalar(select(Category.id).where(and_(Category.user_id == user_id, Category.name == name))) is not None


def create_category(db: Session, user: User, name: str) -> Optional[Category]:
    external_id = user.external_id
    if _name_taken(db, user.id, name):
        return None

    category = Category(user_id=user.id, name=name)
    db.add(category)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        return None
    db.refresh(category)
    logger.info("Category %s (%s) created for user %s", category.id, name, external_id)
    return category


def list_categories(db: Session, user: User) -> list[tuple[Category, int]]:
    rows = db.execute(
        select(Category, func.count(Habit.id))
        .outerjoin(Habit, Habit.category_id == Category.id)
        .where(Category.user_id == user.id)
        .group_by(Category.id)
        .order_by(Category.name)
    ).all()
    return [(category, habit_count) for category, habit_count in rows]


def delete_category(db: Session, category: Category) -> None:
    category_id, name = category.id, category.name
    db.execute(update(Habit).where(Habit.category_id == category_id).values(category_id=None))
    db.delete(category)
    db.commit()
    logger.info("Category %s (%s) deleted", category_id, name)
