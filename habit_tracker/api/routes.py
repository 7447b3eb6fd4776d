from datetime import date, timedelta
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from habit_tracker.analytics import completion_calendar, summarize_habit, to_utc_day
from habit_tracker.api.deps import get_current_user_id, get_db, get_today
from habit_tracker.config import settings
from habit_tracker.crud import (
    create_habit,
    delete_habit,
    ensure_user,
    get_completed_habit_ids,
    get_habit_records,
    get_user_by_external_id,
    get_user_category,
    get_user_habit,
    list_habits,
    update_habit,
    upsert_habit_record,
)
from habit_tracker.models import Habit, User
from habit_tracker.schemas import (
    HabitAnalyticsOut,
    HabitHistoryOut,
    HabitIn,
    HabitOut,
    HabitRecordIn,
    HabitRecordOut,
    HistoryDayOut,
)

router = APIRouter(prefix="/v1/habits", tags=["habits"])

MAX_WINDOW_DAYS = 366


def _get_habit_or_404(db: Session, user: Optional[User], habit_id: int) -> Habit:
    habit = get_user_habit(db, user, habit_id) if user else None
    if not habit:
        raise HTTPException(status_code=404, detail="Habit not found")
    return habit


def _check_category(db: Session, user: User, category_id: Optional[int]) -> None:
    if category_id is None:
        return
    if not get_user_category(db, user, category_id):
        raise HTTPException(status_code=400, detail="Category not found")


def _habit_out(habit: Habit, completed_today: bool = False) -> HabitOut:
    return HabitOut(
        id=habit.id,
        name=habit.name,
        description=habit.description,
        frequency=habit.frequency,
        category_id=habit.category_id,
        created_at=habit.created_at,
        completed_today=completed_today,
    )


def _window_days(days: Optional[int], default: int) -> int:
    if days is None:
        days = default
    return max(1, min(days, MAX_WINDOW_DAYS))


@router.post("", response_model=HabitOut, status_code=201)
def habits_create(
    payload: HabitIn,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> HabitOut:
    user = ensure_user(db, user_id)
    _check_category(db, user, payload.category_id)
    habit = create_habit(
        db,
        user,
        name=payload.name,
        frequency=payload.frequency,
        description=payload.description,
        category_id=payload.category_id,
    )
    return _habit_out(habit)


@router.get("")
def habits_list(
    category_id: Optional[int] = None,
    uncategorized: bool = False,
    user_id: str = Depends(get_current_user_id),
    today: date = Depends(get_today),
    db: Session = Depends(get_db),
) -> Dict[str, Any]:
    user = get_user_by_external_id(db, user_id)
    if not user:
        return {"count": 0, "items": []}
    habits = list_habits(db, user, category_id=category_id, uncategorized=uncategorized)
    done_today = get_completed_habit_ids(db, [h.id for h in habits], today)
    items = [_habit_out(h, h.id in done_today) for h in habits]
    return {"count": len(items), "items": items}


@router.put("/{habit_id}", response_model=HabitOut)
def habits_update(
    habit_id: int,
    payload: HabitIn,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> HabitOut:
    user = get_user_by_external_id(db, user_id)
    habit = _get_habit_or_404(db, user, habit_id)
    _check_category(db, user, payload.category_id)
    habit = update_habit(
        db,
        habit,
        name=payload.name,
        frequency=payload.frequency,
        description=payload.description,
        category_id=payload.category_id,
    )
    return _habit_out(habit)


@router.delete("/{habit_id}")
def habits_delete(
    habit_id: int,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> Dict[str, Any]:
    user = get_user_by_external_id(db, user_id)
    habit = _get_habit_or_404(db, user, habit_id)
    name = habit.name
    delete_habit(db, habit)
    return {"ok": True, "message": f"Habit '{name}' deleted"}


@router.post("/{habit_id}/records", response_model=HabitRecordOut)
def habits_toggle(
    habit_id: int,
    payload: HabitRecordIn,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> HabitRecordOut:
    user = get_user_by_external_id(db, user_id)
    habit = _get_habit_or_404(db, user, habit_id)
    record = upsert_habit_record(db, habit, to_utc_day(payload.date), payload.completed)
    return HabitRecordOut(habit_id=habit.id, day=record.record_date, completed=record.completed)


@router.get("/{habit_id}/analytics", response_model=HabitAnalyticsOut)
def habits_analytics(
    habit_id: int,
    days: Optional[int] = Query(default=None, ge=1, le=MAX_WINDOW_DAYS),
    user_id: str = Depends(get_current_user_id),
    today: date = Depends(get_today),
    db: Session = Depends(get_db),
) -> HabitAnalyticsOut:
    user = get_user_by_external_id(db, user_id)
    habit = _get_habit_or_404(db, user, habit_id)

    end_date = today
    start_date = end_date - timedelta(days=_window_days(days, settings.ANALYTICS_WINDOW_DAYS) - 1)
    summary = summarize_habit(get_habit_records(db, habit), start_date, end_date, today=end_date)

    return HabitAnalyticsOut(
        habit_id=habit.id,
        start_date=start_date,
        end_date=end_date,
        current_streak=summary.current_streak,
        longest_streak=summary.longest_streak,
        completion_percent=summary.completion_percent,
        completed_days=summary.completed_days,
        total_days=summary.total_days,
        skipped_records=summary.skipped_records,
    )


@router.get("/{habit_id}/history", response_model=HabitHistoryOut)
def habits_history(
    habit_id: int,
    days: Optional[int] = Query(default=None, ge=1, le=MAX_WINDOW_DAYS),
    user_id: str = Depends(get_current_user_id),
    today: date = Depends(get_today),
    db: Session = Depends(get_db),
) -> HabitHistoryOut:
    user = get_user_by_external_id(db, user_id)
    habit = _get_habit_or_404(db, user, habit_id)

    end_date = today
    start_date = end_date - timedelta(days=_window_days(days, settings.HEATMAP_DAYS) - 1)
    calendar = completion_calendar(get_habit_records(db, habit, since=start_date), start_date, end_date)

    return HabitHistoryOut(
        habit_id=habit.id,
        start_date=start_date,
        end_date=end_date,
        days=[HistoryDayOut(day=day, completed=completed) for day, completed in calendar],
    )
