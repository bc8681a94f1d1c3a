"""
FastAPI dependencies.
"""

from typing import Generator
from fastapi import Request
from sqlalchemy.orm import Session

from pricebook.config import settings
from pricebook.database import SessionLocal
from pricebook.errors import AuthenticationRequiredError


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for getting database sessions.

    Anything left uncommitted when the request fails is rolled back.
    """
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def get_current_user_id(request: Request) -> int:
    """
    Resolve the authenticated caller.

    The identity provider in front of the API forwards the user id in a
    header; the value is treated as opaque apart from being an integer.
    """
    raw = request.headers.get(settings.user_id_header)
    if raw is None or not raw.strip().isdigit():
        raise AuthenticationRequiredError()
    return int(raw)
