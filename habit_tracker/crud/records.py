import logging
from datetime import date
from typing import Iterable, Optional

from sqlalchemy import and_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from habit_tracker.models import Habit, HabitRecord

logger = logging.getLogger(__name__)


def _find_record(db: Session, habit_id: int, record_date: date) -> Optional[HabitRecord]:
    return db.scalar(
        select(HabitRecord).where(and_(HabitRecord.habit_id == habit_id, HabitRecord.record_date == record_date))
    )


def upsert_habit_record(db: Session, habit: Habit, record_date: date, completed: bool) -> HabitRecord:
    habit_id = habit.id
    record = _find_record(db, habit_id, record_date)
    if record:
        record.completed = completed
    else:
        record = HabitRecord(habit_id=habit_id, record_date=record_date, completed=completed)
    db.add(record)
    try:
        db.commit()
    except IntegrityError:
        # another request inserted the same day first
        db.rollback()
        record = db.scalar(
            select(HabitRecord).where(and_(HabitRecord.habit_id == habit_id, HabitRecord.record_date == record_date))
        )
        record.completed = completed
        db.commit()
    db.refresh(record)
    logger.info("Habit %s marked completed=%s for %s", habit_id, completed, record_date.isoformat())
    return record


def get_habit_records(db: Session, habit: Habit, since: Optional[date] = None) -> list:
    """Return ``(date, completed)`` rows of one habit, oldest first."""
    query = select(HabitRecord.record_date.label("date"), HabitRecord.completed).where(HabitRecord.habit_id == habit.id)
    if since is not None:
        query = query.where(HabitRecord.record_date >= since)
    return list(db.execute(query.order_by(HabitRecord.record_date)).all())


def get_completed_habit_ids(db: Session, habit_ids: Iterable[int], record_date: date) -> set[int]:
    ids = list(habit_ids)
    if not ids:
        return set()
    return set(
        db.scalars(
            select(HabitRecord.habit_id).where(
                and_(
                    HabitRecord.habit_id.in_(ids),
                    HabitRecord.record_date == record_date,
                    HabitRecord.completed.is_(True),
                )
            )
        )
    )
