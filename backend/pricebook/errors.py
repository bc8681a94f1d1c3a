"""
Error taxonomy shared by every layer.

Services raise these; only the API error handlers turn them into responses.
Each error carries an ErrorKind, and ERROR_TABLE is the one place that maps
a kind to its machine-readable code, HTTP status and log level.
No framework imports allowed.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Any, Optional


class ErrorKind(str, enum.Enum):
    """Stable error kinds exposed to clients."""
    validation = "validation"
    not_found = "not_found"
    duplicate_resource = "duplicate_resource"
    business_rule_violation = "business_rule_violation"
    access_denied = "access_denied"
    unauthenticated = "unauthenticated"
    internal = "internal"


@dataclass(frozen=True)
class ErrorSpec:
    """How one error kind is presented and logged."""
    code: str
    status: int
    log_level: int


ERROR_TABLE: dict[ErrorKind, ErrorSpec] = {
    ErrorKind.validation: ErrorSpec("VALIDATION_FAILED", 400, logging.INFO),
    ErrorKind.not_found: ErrorSpec("RESOURCE_NOT_FOUND", 404, logging.INFO),
    ErrorKind.duplicate_resource: ErrorSpec("DUPLICATE_RESOURCE", 409, logging.INFO),
    ErrorKind.business_rule_violation: ErrorSpec("BUSINESS_VALIDATION_FAILED", 400, logging.INFO),
    ErrorKind.access_denied: ErrorSpec("ACCESS_DENIED", 403, logging.WARNING),
    ErrorKind.unauthenticated: ErrorSpec("AUTHENTICATION_REQUIRED", 401, logging.WARNING),
    ErrorKind.internal: ErrorSpec("INTERNAL_ERROR", 500, logging.ERROR),
}

INTERNAL_ERROR_MESSAGE = "An unexpected error occurred"


def spec_for(kind: Optional[ErrorKind]) -> ErrorSpec:
    """Look up an error kind, falling back to internal for anything unknown."""
    return ERROR_TABLE.get(kind, ERROR_TABLE[ErrorKind.internal])


@dataclass(frozen=True)
class FieldError:
    """A single field-level validation failure."""
    field: str
    message: str
    rejected_value: Any = None


class PricebookError(Exception):
    """Base error for everything the API reports with a typed code."""

    kind: ErrorKind = ErrorKind.internal

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)

    @property
    def code(self) -> str:
        return spec_for(self.kind).code

    @property
    def http_status(self) -> int:
        return spec_for(self.kind).status


class ValidationFailedError(PricebookError):
    """Raised when request fields fail format or length rules."""

    kind = ErrorKind.validation

    def __init__(self, field_errors: list[FieldError], message: str = "Request validation failed") -> None:
        super().__init__(message)
        self.field_errors = field_errors


class ResourceNotFoundError(PricebookError):
    """Raised when a resource does not exist or is not owned by the caller.

    The two cases are deliberately indistinguishable.
    """

    kind = ErrorKind.not_found

    def __init__(self, resource_type: str, resource_id: Any) -> None:
        super().__init__(f"{resource_type} '{resource_id}' not found")
        self.resource_type = resource_type
        self.resource_id = resource_id


class DuplicateResourceError(PricebookError):
    """Raised when a uniqueness rule would be violated."""

    kind = ErrorKind.duplicate_resource

    def __init__(self, resource_type: str, field: str, value: Any) -> None:
        super().__init__(f"{resource_type} with {field} '{value}' already exists")
        self.resource_type = resource_type
        self.field = field
        self.value = value


class BusinessRuleViolationError(PricebookError):
    """Raised when a domain rule blocks the requested operation."""

    kind = ErrorKind.business_rule_violation


class AccessDeniedError(PricebookError):
    """Raised when an authenticated caller is forbidden by a rule other than ownership."""

    kind = ErrorKind.access_denied

    def __init__(self, message: str = "Access denied") -> None:
        super().__init__(message)


class AuthenticationRequiredError(PricebookError):
    """Raised when the request carries no usable caller identity."""

    kind = ErrorKind.unauthenticated

    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(message)


class InternalError(PricebookError):
    """Raised for faults the caller cannot act on. The message is never shown."""

    kind = ErrorKind.internal
