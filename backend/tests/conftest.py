"""Shared test fixtures."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from pricebook.database import Base
from pricebook.dependencies import get_db
from pricebook.main import app
from pricebook.models.user import User
from pricebook.models.category import Category
from pricebook.models.item import Item


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test using in-memory SQLite."""
    # Use StaticPool to ensure all connections use the same in-memory database
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    Base.metadata.create_all(bind=engine)

    # Create session
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


def _override_get_db(db_session):
    def override_get_db():
        try:
            yield db_session
        finally:
            pass
    return override_get_db


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database override."""
    app.dependency_overrides[get_db] = _override_get_db(db_session)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def unsafe_client(db_session):
    """Test client that returns 500 responses instead of re-raising server errors."""
    app.dependency_overrides[get_db] = _override_get_db(db_session)
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(sample_user):
    """Headers the upstream identity provider would attach for sample_user."""
    return {"X-User-Id": str(sample_user.id)}


@pytest.fixture
def other_headers(other_user):
    """Headers for other_user."""
    return {"X-User-Id": str(other_user.id)}


@pytest.fixture
def sample_user(db_session):
    """Create the user most tests act as."""
    user = User(id=7, username="alice", is_active=True)
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def other_user(db_session):
    """Create a second user who must never see sample_user's data."""
    user = User(id=8, username="bob", is_active=True)
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def inactive_user(db_session):
    """Create a deactivated user."""
    user = User(id=9, username="carol", is_active=False)
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def sample_category(db_session, sample_user):
    """Create a category owned by sample_user."""
    category = Category(
        owner_id=sample_user.id,
        name="Groceries",
        description="Food and staples",
        archived=False
    )
    db_session.add(category)
    db_session.commit()
    db_session.refresh(category)
    return category


@pytest.fixture
def sample_item(db_session, sample_category):
    """Create an active item in sample_category."""
    item = Item(
        category_id=sample_category.id,
        name="Whole milk",
        brand="Farmhouse",
        archived=False
    )
    db_session.add(item)
    db_session.commit()
    db_session.refresh(item)
    return item
