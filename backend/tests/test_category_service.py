"""Tests for category service rules."""

import pytest
from sqlalchemy.exc import OperationalError

from pricebook.errors import (
    BusinessRuleViolationError,
    DuplicateResourceError,
    ResourceNotFoundError,
)
from pricebook.models.category import Category
from pricebook.models.item import Item
from pricebook.repositories import category_repository
from pricebook.schemas.category import CategoryCreate, CategoryUpdate
from pricebook.services import category_service


class TestCreate:
    """Test category creation."""

    def test_creates_category(self, db_session, sample_user):
        category = category_service.create_category(
            db_session, sample_user.id, CategoryCreate(name="Electronics", description="gadgets")
        )
        assert category.id is not None
        assert category.owner_id == sample_user.id
        assert category.normalized_name == "electronics"
        assert category.child_count == 0

    def test_blank_description_stored_as_null(self, db_session, sample_user):
        category = category_service.create_category(
            db_session, sample_user.id, CategoryCreate(name="Electronics", description="  ")
        )
        assert category.description is None

    def test_duplicate_is_rejected(self, db_session, sample_category):
        with pytest.raises(DuplicateResourceError):
            category_service.create_category(
                db_session, sample_category.owner_id, CategoryCreate(name="gRoCeRiEs")
            )
        assert db_session.query(Category).count() == 1

    def test_unknown_owner(self, db_session):
        with pytest.raises(ResourceNotFoundError):
            category_service.create_category(db_session, 404, CategoryCreate(name="Books"))

    def test_constraint_violation_becomes_duplicate(self, db_session, sample_category, monkeypatch):
        """Losing a race past the pre-check never surfaces as an internal error."""
        monkeypatch.setattr(category_repository, "exists_by_name", lambda *args: False)

        with pytest.raises(DuplicateResourceError):
            category_service.create_category(
                db_session, sample_category.owner_id, CategoryCreate(name="Groceries")
            )
        assert db_session.query(Category).count() == 1

    def test_other_storage_faults_propagate(self, db_session, sample_user, monkeypatch):
        def fail(db, category):
            raise OperationalError("INSERT", {}, Exception("database is locked"))

        monkeypatch.setattr(category_repository, "save", fail)

        with pytest.raises(OperationalError):
            category_service.create_category(db_session, sample_user.id, CategoryCreate(name="Books"))


class TestRead:
    """Test lookups and listing."""

    def test_get_owned(self, db_session, sample_category):
        found = category_service.get_owned_category(db_session, sample_category.owner_id, sample_category.id)
        assert found == sample_category

    def test_foreign_and_missing_look_the_same(self, db_session, sample_category, other_user):
        with pytest.raises(ResourceNotFoundError) as foreign:
            category_service.get_owned_category(db_session, other_user.id, sample_category.id)
        with pytest.raises(ResourceNotFoundError) as missing:
            category_service.get_owned_category(db_session, sample_category.owner_id, 9999)

        assert type(foreign.value) is type(missing.value)
        assert foreign.value.code == missing.value.code

    def test_list_for_owner_without_categories(self, db_session, other_user):
        assert category_service.list_categories(db_session, other_user.id) == []


class TestUpdate:
    """Test partial updates."""

    def test_only_sent_fields_change(self, db_session, sample_category):
        updated = category_service.update_category(
            db_session, sample_category.owner_id, sample_category.id,
            CategoryUpdate(archived=True)
        )
        assert updated.archived is True
        assert updated.name == "Groceries"
        assert updated.description == "Food and staples"

    def test_rename_updates_normalized_name(self, db_session, sample_category):
        updated = category_service.update_category(
            db_session, sample_category.owner_id, sample_category.id,
            CategoryUpdate(name="Food")
        )
        assert updated.normalized_name == "food"
        assert not category_repository.exists_by_name(db_session, sample_category.owner_id, "groceries")

    def test_rename_conflict_rolls_back(self, db_session, sample_category):
        category_service.create_category(db_session, sample_category.owner_id, CategoryCreate(name="Food"))

        with pytest.raises(DuplicateResourceError):
            category_service.update_category(
                db_session, sample_category.owner_id, sample_category.id,
                CategoryUpdate(name="FOOD", description="changed")
            )

        db_session.refresh(sample_category)
        assert sample_category.name == "Groceries"
        assert sample_category.description == "Food and staples"

    def test_reactivating_needs_no_recheck(self, db_session, sample_category):
        owner_id = sample_category.owner_id
        category_service.update_category(db_session, owner_id, sample_category.id, CategoryUpdate(archived=True))
        updated = category_service.update_category(
            db_session, owner_id, sample_category.id, CategoryUpdate(archived=False)
        )
        assert updated.archived is False


class TestDelete:
    """Test the deletion guard."""

    def test_blocked_by_active_items(self, db_session, sample_category, sample_item):
        db_session.add(Item(category_id=sample_category.id, name="Butter", archived=False))
        db_session.commit()

        with pytest.raises(BusinessRuleViolationError) as excinfo:
            category_service.delete_category(db_session, sample_category.owner_id, sample_category.id)

        assert "'Groceries'" in excinfo.value.message
        assert "2 active item(s)" in excinfo.value.message
        assert db_session.query(Category).count() == 1

    def test_deletes_when_only_archived_items(self, db_session, sample_category, sample_item):
        sample_item.archived = True
        db_session.commit()

        category_service.delete_category(db_session, sample_category.owner_id, sample_category.id)

        assert category_repository.find_owned(db_session, sample_category.id, sample_category.owner_id) is None

    def test_missing_category(self, db_session, sample_user):
        with pytest.raises(ResourceNotFoundError):
            category_service.delete_category(db_session, sample_user.id, 1)
