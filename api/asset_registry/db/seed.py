"""Database seeding script."""

import logging

from sqlalchemy.orm import Session

from asset_registry.database import SessionLocal, init_db
from asset_registry.models.category import Category
from asset_registry.models.location import Location
from asset_registry.models.user import User

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = ["Computer Equipment", "Furniture", "Tools", "Vehicles"]
DEFAULT_LOCATIONS = ["Head Office", "Warehouse"]
DEFAULT_ADMIN = {"name": "Administrator", "email": "admin@example.com", "role": "admin"}


def seed_database(db: Session) -> bool:
    """Seed an empty database with default catalog entries and an admin.

    Returns:
        False if the database was already seeded
    """
    if db.query(Category).first() or db.query(User).filter(User.role == "admin").first():
        logger.info("Database already seeded. Skipping.")
        return False

    for name in DEFAULT_CATEGORIES:
        db.add(Category(name=name))
        logger.info(f"Created category: {name}")

    for name in DEFAULT_LOCATIONS:
        db.add(Location(name=name))
        logger.info(f"Created location: {name}")

    db.add(User(is_account=True, **DEFAULT_ADMIN))
    logger.info(f"Created admin account: {DEFAULT_ADMIN['email']}")

    try:
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Error seeding database: {e}")
        raise

    logger.info("Database seeded successfully")
    return True


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    logger.info("Starting database seeding...")
    init_db()
    session = SessionLocal()
    try:
        seed_database(session)
    finally:
        session.close()
