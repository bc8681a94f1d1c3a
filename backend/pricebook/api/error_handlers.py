"""
Error handlers: the one place where failures become HTTP responses.

Invariants:
    - Every failure, typed or not, leaves as the same envelope:
      {status, errorCode, message, path, timestamp[, fieldErrors]}
    - Code and status come from pricebook.errors.ERROR_TABLE, keyed by kind
    - Anything without a known kind is internal: logged with its traceback,
      answered with a fixed message that leaks no detail
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from pricebook.errors import (
    INTERNAL_ERROR_MESSAGE,
    ErrorKind,
    FieldError,
    PricebookError,
    spec_for,
)
from pricebook.schemas.error import ErrorResponse, FieldErrorResponse

logger = logging.getLogger(__name__)

# Framework-raised HTTP errors (unknown route, wrong method, ...)
HTTP_STATUS_KINDS = {
    400: ErrorKind.validation,
    401: ErrorKind.unauthenticated,
    403: ErrorKind.access_denied,
    404: ErrorKind.not_found,
    405: ErrorKind.not_found,
    409: ErrorKind.duplicate_resource,
}

REQUEST_LOCATIONS = ("body", "query", "path", "header", "cookie")


def register_error_handlers(app: FastAPI) -> None:
    """Route every exception type the app can raise to handle_error."""
    app.add_exception_handler(PricebookError, handle_error)
    app.add_exception_handler(RequestValidationError, handle_error)
    app.add_exception_handler(StarletteHTTPException, handle_error)
    app.add_exception_handler(Exception, handle_error)


async def handle_error(request: Request, exc: Exception) -> JSONResponse:
    """Translate an exception into the error envelope and log it."""
    kind, message, field_errors = classify(exc)
    spec = spec_for(kind)

    if kind == ErrorKind.internal:
        logger.error(
            "Unhandled %s on %s %s",
            type(exc).__name__, request.method, request.url.path,
            exc_info=(type(exc), exc, exc.__traceback__),
        )
        message = INTERNAL_ERROR_MESSAGE
        field_errors = None
    else:
        logger.log(
            spec.log_level,
            "%s on %s %s: %s",
            spec.code, request.method, request.url.path, message,
        )

    body = ErrorResponse(
        status=spec.status,
        error_code=spec.code,
        message=message,
        path=request.url.path,
        timestamp=datetime.now(timezone.utc),
        field_errors=[
            FieldErrorResponse(field=e.field, message=e.message, rejected_value=e.rejected_value)
            for e in field_errors
        ] if field_errors is not None else None,
    ).model_dump(mode="json", by_alias=True)
    if body["fieldErrors"] is None:
        del body["fieldErrors"]

    # Keeps framework headers such as Allow on a wrong-method request
    headers = getattr(exc, "headers", None)
    return JSONResponse(status_code=spec.status, content=body, headers=headers)


def classify(exc: Exception) -> Tuple[ErrorKind, str, Optional[List[FieldError]]]:
    """Work out the kind, client message and field errors for an exception."""
    if isinstance(exc, PricebookError):
        return exc.kind, exc.message, getattr(exc, "field_errors", None)
    if isinstance(exc, RequestValidationError):
        return ErrorKind.validation, "Request validation failed", field_errors_from(exc)
    if isinstance(exc, StarletteHTTPException):
        kind = HTTP_STATUS_KINDS.get(exc.status_code, ErrorKind.internal)
        return kind, str(exc.detail), None
    return ErrorKind.internal, INTERNAL_ERROR_MESSAGE, None


def field_errors_from(exc: RequestValidationError) -> List[FieldError]:
    """Flatten FastAPI validation errors into field errors."""
    field_errors = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        if len(loc) > 1 and loc[0] in REQUEST_LOCATIONS:
            loc = loc[1:]
        rejected = None if error.get("type") == "missing" else _printable(error.get("input"))
        field_errors.append(FieldError(
            field=".".join(loc),
            message=error.get("msg", "Invalid value"),
            rejected_value=rejected,
        ))
    return field_errors


def _printable(value):
    """Make a rejected value JSON-safe. Non-JSON bodies arrive as raw bytes."""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return value
