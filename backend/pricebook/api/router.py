"""
Main API router.
"""

from fastapi import APIRouter
from pricebook.api import categories, items

api_router = APIRouter()

api_router.include_router(categories.router, prefix="/categories", tags=["categories"])
api_router.include_router(items.router, prefix="/categories", tags=["items"])
