"""User lookups."""

from typing import Optional
from sqlalchemy.orm import Session

from pricebook.models.user import User


def find_active(db: Session, user_id: int) -> Optional[User]:
    """Find a user that can still own resources."""
    return db.query(User).filter(
        User.id == user_id,
        User.is_active == True
    ).first()
