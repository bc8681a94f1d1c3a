"""Ownership-scoped category queries."""

from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from pricebook.models.category import Category, normalize_name
from pricebook.models.item import Item


def find_owned(db: Session, category_id: int, owner_id: int) -> Optional[Category]:
    """
    Find a category by id and owner in one query.

    A category owned by someone else is indistinguishable from a missing one.
    """
    return db.query(Category).filter(
        Category.id == category_id,
        Category.owner_id == owner_id
    ).first()


def exists_by_name(db: Session, owner_id: int, name: str) -> bool:
    """Case-insensitive name check scoped to one owner."""
    query = db.query(Category.id).filter(
        Category.owner_id == owner_id,
        Category.normalized_name == normalize_name(name)
    )
    return db.query(query.exists()).scalar()


def exists_by_name_excluding(db: Session, owner_id: int, name: str, exclude_id: int) -> bool:
    """Same as exists_by_name, ignoring one category (used on rename)."""
    query = db.query(Category.id).filter(
        Category.owner_id == owner_id,
        Category.normalized_name == normalize_name(name),
        Category.id != exclude_id
    )
    return db.query(query.exists()).scalar()


def list_owned(db: Session, owner_id: int, include_archived: bool = False) -> List[Category]:
    """List an owner's categories ordered by name."""
    query = db.query(Category).filter(Category.owner_id == owner_id)
    if not include_archived:
        query = query.filter(Category.archived == False)
    return query.order_by(Category.normalized_name, Category.id).all()


def count_active_items(db: Session, category_id: int) -> int:
    """Count the non-archived items that reference a category."""
    return db.query(func.count(Item.id)).filter(
        Item.category_id == category_id,
        Item.archived == False
    ).scalar()


def save(db: Session, category: Category) -> Category:
    """Insert or update a category and flush so constraints fire now."""
    db.add(category)
    db.flush()
    return category


def delete(db: Session, category: Category) -> None:
    """Permanently remove a category. Callers check the deletion guard first."""
    db.delete(category)
    db.flush()
