"""
Service for category rules.

Every write runs in one transaction. The name pre-checks are advisory; the
unique constraint on (owner_id, normalized_name) has the final say, and its
IntegrityError is reported as DuplicateResourceError.
"""

import logging
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from pricebook.errors import (
    BusinessRuleViolationError,
    DuplicateResourceError,
    ResourceNotFoundError,
)
from pricebook.models.category import Category, normalize_name
from pricebook.repositories import category_repository, user_repository
from pricebook.schemas.category import CategoryCreate, CategoryUpdate
from pricebook.services.transaction import write_transaction

logger = logging.getLogger(__name__)


def get_owned_category(db: Session, owner_id: int, category_id: int) -> Category:
    """Load a category the caller owns, or raise ResourceNotFoundError."""
    category = category_repository.find_owned(db, category_id, owner_id)
    if not category:
        raise ResourceNotFoundError("Category", category_id)
    return category


def list_categories(db: Session, owner_id: int, include_archived: bool = False) -> List[Category]:
    """List the caller's categories. An owner with none gets an empty list."""
    return category_repository.list_owned(db, owner_id, include_archived)


def create_category(db: Session, owner_id: int, data: CategoryCreate) -> Category:
    """Create a category for the caller."""
    try:
        with write_transaction(db):
            owner = user_repository.find_active(db, owner_id)
            if not owner:
                raise ResourceNotFoundError("User", owner_id)

            if category_repository.exists_by_name(db, owner_id, data.name):
                raise DuplicateResourceError("Category", "name", data.name)

            category = Category(
                owner_id=owner.id,
                name=data.name,
                description=data.description or None,
                archived=False,
            )
            category_repository.save(db, category)
    except IntegrityError as exc:
        # Another request created the same name between the check and the insert
        logger.info("Concurrent create of category %r for owner %s", data.name, owner_id)
        raise DuplicateResourceError("Category", "name", data.name) from exc

    db.refresh(category)
    logger.info("Created category %s for owner %s", category.id, owner_id)
    return category


def update_category(db: Session, owner_id: int, category_id: int, update: CategoryUpdate) -> Category:
    """
    Apply a partial update.

    Only fields present in the request change. Renaming to a name that differs
    from the current one only by letter case skips the uniqueness check.
    """
    changes = update.changes()
    new_name = changes.get("name")

    try:
        with write_transaction(db):
            category = get_owned_category(db, owner_id, category_id)

            if new_name is not None and normalize_name(new_name) != category.normalized_name:
                if category_repository.exists_by_name_excluding(db, owner_id, new_name, category.id):
                    raise DuplicateResourceError("Category", "name", new_name)

            if "name" in changes:
                category.name = changes["name"]
            if "description" in changes:
                category.description = changes["description"] or None
            if "archived" in changes:
                category.archived = changes["archived"]

            category_repository.save(db, category)
    except IntegrityError as exc:
        logger.info("Concurrent rename of category %s to %r", category_id, new_name)
        raise DuplicateResourceError("Category", "name", new_name) from exc

    db.refresh(category)
    if changes:
        logger.info("Updated category %s fields %s", category.id, sorted(changes))
    return category


def delete_category(db: Session, owner_id: int, category_id: int) -> None:
    """
    Permanently delete a category.

    Refused while any non-archived item still references it; archived items
    are removed together with the category.
    """
    with write_transaction(db):
        category = get_owned_category(db, owner_id, category_id)

        active_items = category_repository.count_active_items(db, category.id)
        if active_items > 0:
            raise BusinessRuleViolationError(
                f"Category '{category.name}' cannot be deleted: it still has "
                f"{active_items} active item(s). Archive the category instead."
            )

        category_repository.delete(db, category)

    logger.info("Deleted category %s for owner %s", category_id, owner_id)
