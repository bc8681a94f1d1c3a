"""
Pydantic schemas package.
"""

from pricebook.schemas.category import (
    CategoryBase,
    CategoryCreate,
    CategoryUpdate,
    CategoryResponse,
)
from pricebook.schemas.item import (
    ItemCreate,
    ItemUpdate,
    ItemResponse,
)
from pricebook.schemas.error import (
    ErrorResponse,
    FieldErrorResponse,
)

__all__ = [
    "CategoryBase",
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryResponse",
    "ItemCreate",
    "ItemUpdate",
    "ItemResponse",
    "ErrorResponse",
    "FieldErrorResponse",
]
