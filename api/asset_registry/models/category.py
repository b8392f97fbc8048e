"""Category model."""

from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, String

from asset_registry.database import Base


class Category(Base):
    """Asset category."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, unique=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<Category(id={self.id}, name={self.name})>"
