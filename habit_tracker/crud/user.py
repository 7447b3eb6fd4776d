import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from habit_tracker.models import User

logger = logging.getLogger(__name__)


def get_user_by_external_id(db: Session, external_id: str) -> Optional[User]:
    return db.scalar(select(User).where(User.external_id == external_id))


def ensure_user(db: Session, external_id: str) -> User:
    user = get_user_by_external_id(db, external_id)
    if user:
        return user

    user = User(external_id=external_id)
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # created by a concurrent request
        db.rollback()
        return db.scalar(select(User).where(User.external_id == external_id))
    db.refresh(user)
    logger.info("Created user record for %s", external_id)
    return user
