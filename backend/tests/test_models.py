"""Tests for model identity and invariants."""

import pytest

from pricebook.models.category import Category, normalize_name


class TestCategoryIdentity:
    """Category equality follows the business key."""

    def test_uuid_assigned_before_persistence(self):
        category = Category(owner_id=1, name="Books")
        assert category.id is None
        assert category.uuid

    def test_distinct_categories_are_not_equal(self):
        assert Category(owner_id=1, name="Books") != Category(owner_id=1, name="Books")

    def test_same_business_key_is_equal(self):
        first = Category(owner_id=1, name="Books", uuid="7f1c2a4e-0000-4000-8000-000000000001")
        second = Category(owner_id=1, name="Novels", uuid="7f1c2a4e-0000-4000-8000-000000000001")
        assert first == second
        assert hash(first) == hash(second)

    def test_hash_survives_field_changes(self):
        category = Category(owner_id=1, name="Books")
        bucket = {category}
        category.name = "Magazines"
        category.archived = True
        assert category in bucket

    def test_equal_after_reload(self, db_session, sample_category):
        db_session.expunge_all()
        reloaded = db_session.get(Category, sample_category.id)
        assert reloaded is not sample_category
        assert reloaded == sample_category


class TestCategoryInvariants:
    """Invariants enforced on the entity itself."""

    def test_normalized_name_tracks_name(self):
        category = Category(owner_id=1, name="Home Office")
        assert category.normalized_name == "home office"
        category.name = "HOME"
        assert category.normalized_name == "home"

    def test_owner_cannot_change(self, sample_category, other_user):
        with pytest.raises(ValueError):
            sample_category.owner_id = other_user.id

    def test_normalize_name(self):
        assert normalize_name("  Straße ") == "strasse"
