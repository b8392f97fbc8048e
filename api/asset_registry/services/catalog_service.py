"""Category and location catalog service."""

import logging
from typing import List, Type, TypeVar

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from asset_registry.models.category import Category
from asset_registry.models.location import Location
from asset_registry.services.activity_log import record_activity
from asset_registry.services.actor import Actor
from asset_registry.services.errors import DuplicateNameError

logger = logging.getLogger(__name__)

CatalogModel = TypeVar("CatalogModel", Category, Location)


def _list_entries(db: Session, model: Type[CatalogModel]) -> List[CatalogModel]:
    return db.query(model).order_by(model.name).all()


def _add_entry(db: Session, model: Type[CatalogModel], name: str, actor: Actor) -> CatalogModel:
    kind = model.__name__.lower()
    name = name.strip()

    existing = db.query(model).filter(func.lower(model.name) == name.lower()).first()
    if existing:
        raise DuplicateNameError(f"{model.__name__} '{name}' already exists")

    entry = model(name=name)
    db.add(entry)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise DuplicateNameError(f"{model.__name__} '{name}' already exists")
    db.refresh(entry)

    logger.info(f"Added {kind} '{name}'")
    record_activity(db, actor.name, f"Added {kind} {name}")
    return entry


def list_categories(db: Session) -> List[Category]:
    """All categories ordered by name."""
    return _list_entries(db, Category)


def add_category(db: Session, name: str, actor: Actor) -> Category:
    """
    Add a category.

    Raises:
        DuplicateNameError: If a category with the same name (any case) exists
    """
    return _add_entry(db, Category, name, actor)


def list_locations(db: Session) -> List[Location]:
    """All locations ordered by name."""
    return _list_entries(db, Location)


def add_location(db: Session, name: str, actor: Actor) -> Location:
    """
    Add a location.

    Raises:
        DuplicateNameError: If a location with the same name (any case) exists
    """
    return _add_entry(db, Location, name, actor)
