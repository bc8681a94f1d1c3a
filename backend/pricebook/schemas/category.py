"""
Category Pydantic schemas for API validation.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import Any, Dict, Optional


class CategoryBase(BaseModel):
    """Base category schema."""
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=2, max_length=100)
    description: Optional[str] = Field(None, max_length=500)


class CategoryCreate(CategoryBase):
    """Schema for creating a category."""
    pass


class CategoryUpdate(BaseModel):
    """
    Schema for updating a category.

    Fields left out of the request body are unset and stay unchanged.
    An explicit null is treated the same way; an empty description clears it.
    """
    model_config = ConfigDict(str_strip_whitespace=True)

    name: Optional[str] = Field(None, min_length=2, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    archived: Optional[bool] = None

    def changes(self) -> Dict[str, Any]:
        """Return only the fields the caller asked to change."""
        values = self.model_dump(exclude_unset=True)
        return {key: value for key, value in values.items() if value is not None}


class CategoryResponse(BaseModel):
    """Schema for category response."""
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    id: int
    name: str
    description: Optional[str]
    archived: bool
    child_count: int
    created_at: datetime
    updated_at: datetime
