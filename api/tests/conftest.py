"""Pytest configuration and fixtures."""

import os

# Keep the app's own engine off the developer database
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import asset_registry.models  # noqa: F401
from asset_registry.database import Base, get_db
from asset_registry.main import app

ADMIN_HEADERS = {"X-User-Name": "Ana Admin", "X-User-Role": "admin"}
USER_HEADERS = {"X-User-Name": "Ulises User", "X-User-Role": "user"}


@pytest.fixture
def client():
    """Create a test client."""
    return TestClient(app)


@pytest.fixture
def test_engine():
    """Create a fresh in-memory database per test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def test_db(test_engine):
    """Create a test database session."""
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client_with_db(test_db):
    """Create a test client with database session override."""

    def override_get_db():
        try:
            yield test_db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.pop(get_db, None)


@pytest.fixture
def asset_payload():
    """Valid body for creating an asset."""
    return {
        "name": "laptop dell",
        "category": "Computer Equipment",
        "status": "Active",
        "location": "Head Office",
        "quantity": 2,
        "acquisition_date": "2020-01-01",
        "initial_cost": 1000,
        "annual_depreciation_rate": 10,
    }
