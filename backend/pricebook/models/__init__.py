"""
Database models package.
"""

from pricebook.models.user import User
from pricebook.models.category import Category, normalize_name
from pricebook.models.item import Item

__all__ = [
    "User",
    "Category",
    "Item",
    "normalize_name",
]
