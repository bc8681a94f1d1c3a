"""
Item Pydantic schemas.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import Any, Dict, Optional


class ItemCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=100)
    brand: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = Field(None, max_length=500)


class ItemUpdate(BaseModel):
    """Partial item update; same unset/null rules as CategoryUpdate."""
    model_config = ConfigDict(str_strip_whitespace=True)

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    brand: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    archived: Optional[bool] = None

    def changes(self) -> Dict[str, Any]:
        values = self.model_dump(exclude_unset=True)
        return {key: value for key, value in values.items() if value is not None}


class ItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    id: int
    category_id: int
    name: str
    brand: Optional[str]
    description: Optional[str]
    archived: bool
    created_at: datetime
    updated_at: datetime
