"""
Seed script for a demo user with default categories and items.
"""

import logging

from sqlalchemy.orm import Session

from pricebook.database import SessionLocal
from pricebook.logging_config import configure_logging
from pricebook.models import Category, Item, User

logger = logging.getLogger(__name__)

DEMO_USERNAME = "demo"

CATEGORIES_DATA = [
    {
        "name": "Groceries",
        "description": "Food and household staples",
        "items": [
            {"name": "Whole milk", "brand": "Farmhouse"},
            {"name": "Sourdough bread", "brand": None},
            {"name": "Eggs (12)", "brand": "Happy Hen"},
        ]
    },
    {
        "name": "Electronics",
        "description": "Gadgets and accessories",
        "items": [
            {"name": "USB-C cable", "brand": "Anker"},
        ]
    },
    {
        "name": "Pharmacy",
        "description": None,
        "items": [
            {"name": "Ibuprofen 200mg", "brand": None},
        ]
    },
    {
        "name": "Household",
        "description": "Cleaning supplies",
        "items": []
    },
]


def seed_demo_data(db: Session) -> int:
    """
    Seed the demo user and categories. Does nothing if the user exists.

    Returns the number of categories created.
    """
    if db.query(User).filter(User.username == DEMO_USERNAME).first():
        logger.info("Demo data already seeded")
        return 0

    try:
        user = User(username=DEMO_USERNAME, is_active=True)
        db.add(user)
        db.flush()  # Get the user ID

        for cat_data in CATEGORIES_DATA:
            category = Category(
                owner_id=user.id,
                name=cat_data["name"],
                description=cat_data["description"],
                archived=False,
            )
            db.add(category)
            db.flush()  # Get the category ID

            for item_data in cat_data["items"]:
                db.add(Item(
                    category_id=category.id,
                    name=item_data["name"],
                    brand=item_data["brand"],
                    archived=False,
                ))

        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info("Seeded %d categories for user %s", len(CATEGORIES_DATA), user.id)
    return len(CATEGORIES_DATA)


if __name__ == "__main__":
    configure_logging()
    session = SessionLocal()
    try:
        seed_demo_data(session)
    finally:
        session.close()
