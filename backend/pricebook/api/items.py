"""
Item API endpoints, nested under the owning category.
"""

from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.orm import Session
from typing import List

from pricebook.api.categories import ERROR_RESPONSES, MAX_ID
from pricebook.dependencies import get_db, get_current_user_id
from pricebook.schemas.item import ItemCreate, ItemUpdate, ItemResponse
from pricebook.services import item_service

router = APIRouter()


@router.get("/{category_id}/items", response_model=List[ItemResponse], responses=ERROR_RESPONSES)
def list_items(
    category_id: int = Path(..., ge=1, le=MAX_ID),
    include_archived: bool = Query(False, alias="includeArchived"),
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """List the items of a category."""
    return item_service.list_items(db, user_id, category_id, include_archived)


@router.post("/{category_id}/items", response_model=ItemResponse, status_code=201, responses=ERROR_RESPONSES)
def create_item(
    item: ItemCreate,
    category_id: int = Path(..., ge=1, le=MAX_ID),
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Add an item to a category."""
    return item_service.create_item(db, user_id, category_id, item)


@router.put("/{category_id}/items/{item_id}", response_model=ItemResponse, responses=ERROR_RESPONSES)
def update_item(
    item_update: ItemUpdate,
    category_id: int = Path(..., ge=1, le=MAX_ID),
    item_id: int = Path(..., ge=1, le=MAX_ID),
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Update an item. Archive it to let its category be deleted."""
    return item_service.update_item(db, user_id, category_id, item_id, item_update)
