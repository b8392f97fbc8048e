"""SQLAlchemy models."""

from asset_registry.database import Base
from asset_registry.models.activity_log import ActivityLog
from asset_registry.models.asset import Asset
from asset_registry.models.category import Category
from asset_registry.models.id_counter import IdCounter
from asset_registry.models.location import Location
from asset_registry.models.user import User

__all__ = [
    "Base",
    "ActivityLog",
    "Asset",
    "Category",
    "IdCounter",
    "Location",
    "User",
]
