"""
Error envelope returned by every failing request.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import Any, List, Optional


class FieldErrorResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    field: str
    message: str
    rejected_value: Any = None


class ErrorResponse(BaseModel):
    """Uniform error body."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    status: int
    error_code: str
    message: str
    path: str
    timestamp: datetime
    field_errors: Optional[List[FieldErrorResponse]] = None
