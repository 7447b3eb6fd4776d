from fastapi import APIRouter

from habit_tracker.api.categories import router as categories_router
from habit_tracker.api.routes import router as habits_router

router = APIRouter()
router.include_router(habits_router)
router.include_router(categories_router)

__all__ = ["router"]
