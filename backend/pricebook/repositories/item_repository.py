"""Item queries, always scoped through their category."""

from typing import List, Optional
from sqlalchemy.orm import Session

from pricebook.models.item import Item


def find_in_category(db: Session, item_id: int, category_id: int) -> Optional[Item]:
    """Find an item only if it belongs to the given category."""
    return db.query(Item).filter(
        Item.id == item_id,
        Item.category_id == category_id
    ).first()


def list_for_category(db: Session, category_id: int, include_archived: bool = False) -> List[Item]:
    """List a category's items ordered by name."""
    query = db.query(Item).filter(Item.category_id == category_id)
    if not include_archived:
        query = query.filter(Item.archived == False)
    return query.order_by(Item.name, Item.id).all()


def save(db: Session, item: Item) -> Item:
    """Insert or update an item."""
    db.add(item)
    db.flush()
    return item
