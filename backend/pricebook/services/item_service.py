"""Service for items filed under a category.

Items are reached only through a category the caller owns, so ownership
rules for categories cover items too.
"""

import logging
from typing import List

from sqlalchemy.orm import Session

from pricebook.errors import BusinessRuleViolationError, ResourceNotFoundError
from pricebook.models.item import Item
from pricebook.repositories import item_repository
from pricebook.schemas.item import ItemCreate, ItemUpdate
from pricebook.services.category_service import get_owned_category
from pricebook.services.transaction import write_transaction

logger = logging.getLogger(__name__)


def list_items(db: Session, owner_id: int, category_id: int, include_archived: bool = False) -> List[Item]:
    """List the items of one of the caller's categories."""
    category = get_owned_category(db, owner_id, category_id)
    return item_repository.list_for_category(db, category.id, include_archived)


def create_item(db: Session, owner_id: int, category_id: int, data: ItemCreate) -> Item:
    """Add an item to a category. Archived categories take no new items."""
    with write_transaction(db):
        category = get_owned_category(db, owner_id, category_id)
        if category.archived:
            raise BusinessRuleViolationError(
                f"Category '{category.name}' is archived and cannot take new items"
            )

        item = Item(
            category_id=category.id,
            name=data.name,
            brand=data.brand or None,
            description=data.description or None,
            archived=False,
        )
        item_repository.save(db, item)

    db.refresh(item)
    logger.info("Created item %s in category %s", item.id, category_id)
    return item


def update_item(db: Session, owner_id: int, category_id: int, item_id: int, update: ItemUpdate) -> Item:
    """Apply a partial update to an item. Empty brand or description clears it."""
    changes = update.changes()

    with write_transaction(db):
        category = get_owned_category(db, owner_id, category_id)
        item = item_repository.find_in_category(db, item_id, category.id)
        if not item:
            raise ResourceNotFoundError("Item", item_id)

        if "name" in changes:
            item.name = changes["name"]
        for field in ("brand", "description"):
            if field in changes:
                setattr(item, field, changes[field] or None)
        if "archived" in changes:
            item.archived = changes["archived"]

        item_repository.save(db, item)

    db.refresh(item)
    if changes:
        logger.info("Updated item %s fields %s", item.id, sorted(changes))
    return item
