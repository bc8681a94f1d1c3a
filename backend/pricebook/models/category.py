"""
Category database model.
"""

from uuid import uuid4
from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship, validates
from sqlalchemy.sql import func
from pricebook.database import Base


def normalize_name(name: str) -> str:
    """Key used for case-insensitive name comparison."""
    return name.strip().casefold()


class Category(Base):
    """
    Category owned by a single user.

    Two Category objects are equal when they share the same business key
    (uuid), which is fixed at construction. The storage id is not usable for
    that because it is absent until the row is flushed.
    """

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    uuid = Column(String(36), unique=True, nullable=False)
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    normalized_name = Column(String(100), nullable=False)
    description = Column(String(500), nullable=True)
    archived = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

    # Relationships
    owner = relationship("User", back_populates="categories")
    items = relationship(
        "Item",
        back_populates="category",
        cascade="all, delete-orphan",
        order_by="Item.id",
    )

    # Authoritative uniqueness; the service-level pre-check is only advisory
    __table_args__ = (
        UniqueConstraint("owner_id", "normalized_name", name="uq_categories_owner_name"),
    )

    def __init__(self, **kwargs):
        kwargs.setdefault("uuid", str(uuid4()))
        super().__init__(**kwargs)

    @validates("name")
    def _sync_normalized_name(self, key, value):
        self.normalized_name = normalize_name(value)
        return value

    @validates("owner_id")
    def _freeze_owner(self, key, value):
        if self.owner_id is not None and value != self.owner_id:
            raise ValueError("Category ownership cannot be transferred")
        return value

    @property
    def child_count(self) -> int:
        return len(self.items)

    def __eq__(self, other):
        if not isinstance(other, Category):
            return NotImplemented
        return self.uuid == other.uuid

    def __hash__(self):
        return hash(self.uuid)

    def __repr__(self):
        return f"<Category {self.uuid} {self.name!r} owner={self.owner_id}>"
