"""Asset model."""

from datetime import datetime

from sqlalchemy import BigInteger, Column, Date, DateTime, Integer, Numeric, String, Text

from asset_registry.database import Base


class Asset(Base):
    """Asset model for tracked inventory items."""

    __tablename__ = "assets"

    # Ids come from the identifier allocator, never from the database
    id = Column(BigInteger, primary_key=True, autoincrement=False)
    name = Column(String(255), nullable=False, index=True)
    category = Column(String(255), nullable=False, index=True)
    status = Column(String(100), nullable=False, index=True)
    location = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=True)
    observation = Column(Text, nullable=True)
    quantity = Column(Integer, nullable=False, default=1)
    acquisition_date = Column(Date, nullable=False)
    initial_cost = Column(Numeric(14, 2), nullable=False)
    annual_depreciation_rate = Column(Numeric(5, 2), nullable=False, default=0)
    assigned_user_id = Column(Integer, nullable=True)
    assigned_user_name = Column(String(255), nullable=True)
    registration_timestamp = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<Asset(id={self.id}, name={self.name}, location={self.location})>"
