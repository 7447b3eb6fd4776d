from datetime import date
from typing import Generator

from fastapi import HTTPException, Request
from sqlalchemy.orm import Session

from habit_tracker.analytics import today_utc
from habit_tracker.config import settings
from habit_tracker.db import SessionLocal


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def get_current_user_id(request: Request) -> str:
    # Authentication happens upstream; the gateway forwards the provider's user id.
    user_id = (request.headers.get(settings.AUTH_USER_HEADER) or "").strip()
    if not user_id:
        raise HTTPException(status_code=401, detail="User not authenticated")
    return user_id


def get_today() -> date:
    return today_utc()
