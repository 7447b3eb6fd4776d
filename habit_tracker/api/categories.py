from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from habit_tracker.api.deps import get_current_user_id, get_db
from habit_tracker.crud import (
    create_category,
    delete_category,
    ensure_user,
    get_user_by_external_id,
    get_user_category,
    list_categories,
)
from habit_tracker.schemas import CategoryIn, CategoryOut

router = APIRouter(prefix="/v1/categories", tags=["categories"])


@router.post("", response_model=CategoryOut, status_code=201)
def categories_create(
    payload: CategoryIn,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> CategoryOut:
    user = ensure_user(db, user_id)
    category = create_category(db, user, payload.name)
    if not category:
        raise HTTPException(status_code=409, detail="A category with this name already exists")
    return CategoryOut(id=category.id, name=category.name, habit_count=0)


@router.get("")
def categories_list(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> Dict[str, Any]:
    user = get_user_by_external_id(db, user_id)
    if not user:
        return {"count": 0, "items": []}
    items = [
        CategoryOut(id=category.id, name=category.name, habit_count=habit_count)
        for category, habit_count in list_categories(db, user)
    ]
    return {"count": len(items), "items": items}


@router.delete("/{category_id}")
def categories_delete(
    category_id: int,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> Dict[str, Any]:
    user = get_user_by_external_id(db, user_id)
    category = get_user_category(db, user, category_id) if user else None
    if not category:
        raise HTTPException(status_code=404, detail="Category not found")
    name = category.name
    delete_category(db, category)
    return {"ok": True, "message": f"Category '{name}' deleted"}
