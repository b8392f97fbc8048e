"""Identifier counter model."""

from sqlalchemy import BigInteger, Column, String

from asset_registry.database import Base


class IdCounter(Base):
    """Highest id ever handed out for a sequence.

    Survives deletes, so an id whose QR tag may already be printed is never
    given to another record.
    """

    __tablename__ = "id_counters"

    name = Column(String(50), primary_key=True)
    high_water = Column(BigInteger, nullable=False, default=0)

    def __repr__(self):
        return f"<IdCounter(name={self.name}, high_water={self.high_water})>"
