"""Commit-or-rollback scope for one service operation."""

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


@contextmanager
def write_transaction(db: Session) -> Iterator[Session]:
    """
    Run a block as a single unit of work.

    Commits once when the block finishes; on any exception the session is
    rolled back and the exception propagates unchanged.
    """
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        logger.debug("Transaction rolled back")
        raise
