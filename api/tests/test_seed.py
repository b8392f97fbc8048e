"""Database seeding tests."""

from asset_registry.db.seed import DEFAULT_CATEGORIES, DEFAULT_LOCATIONS, seed_database
from asset_registry.models.category import Category
from asset_registry.models.location import Location
from asset_registry.models.user import User


def test_seed_empty_database(test_db):
    assert seed_database(test_db) is True
    assert sorted(c.name for c in test_db.query(Category)) == sorted(DEFAULT_CATEGORIES)
    assert test_db.query(Location).count() == len(DEFAULT_LOCATIONS)
    admin = test_db.query(User).one()
    assert admin.role == "admin"
    assert admin.is_account


def test_seed_is_idempotent(test_db):
    seed_database(test_db)
    assert seed_database(test_db) is False
    assert test_db.query(Category).count() == len(DEFAULT_CATEGORIES)
