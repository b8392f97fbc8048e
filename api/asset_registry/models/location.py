"""Location model."""

from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, String

from asset_registry.database import Base


class Location(Base):
    """Physical place where assets are kept."""

    __tablename__ = "locations"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, unique=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<Location(id={self.id}, name={self.name})>"
