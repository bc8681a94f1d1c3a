"""
Category API endpoints.

Handlers decode, call the service and encode. Errors are never caught here;
they reach the handlers registered in pricebook.api.error_handlers.
"""

from fastapi import APIRouter, Depends, Path, Query, Request, Response
from sqlalchemy.orm import Session
from typing import List

from pricebook.dependencies import get_db, get_current_user_id
from pricebook.schemas.category import (
    CategoryCreate,
    CategoryUpdate,
    CategoryResponse,
)
from pricebook.schemas.error import ErrorResponse
from pricebook.services import category_service

router = APIRouter()

# Largest id the storage layer can hold (signed 64-bit)
MAX_ID = 2**63 - 1

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    409: {"model": ErrorResponse},
}


@router.get("", response_model=List[CategoryResponse], responses=ERROR_RESPONSES)
def list_categories(
    include_archived: bool = Query(False, alias="includeArchived"),
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """List the caller's categories ordered by name."""
    return category_service.list_categories(db, user_id, include_archived)


@router.post("", response_model=CategoryResponse, status_code=201, responses=ERROR_RESPONSES)
def create_category(
    category: CategoryCreate,
    request: Request,
    response: Response,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Create a new category."""
    created = category_service.create_category(db, user_id, category)
    response.headers["Location"] = str(request.url_for("get_category", category_id=created.id))
    return created


@router.get("/{category_id}", response_model=CategoryResponse, responses=ERROR_RESPONSES)
def get_category(
    category_id: int = Path(..., ge=1, le=MAX_ID),
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Get a specific category."""
    return category_service.get_owned_category(db, user_id, category_id)


@router.put("/{category_id}", response_model=CategoryResponse, responses=ERROR_RESPONSES)
def update_category(
    category_update: CategoryUpdate,
    category_id: int = Path(..., ge=1, le=MAX_ID),
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Update a category. Fields not sent are left unchanged."""
    return category_service.update_category(db, user_id, category_id, category_update)


@router.delete("/{category_id}", status_code=204, responses=ERROR_RESPONSES)
def delete_category(
    category_id: int = Path(..., ge=1, le=MAX_ID),
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Delete a category that has no active items."""
    category_service.delete_category(db, user_id, category_id)
    return Response(status_code=204)
