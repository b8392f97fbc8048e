"""Activity log model."""

from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, String

from asset_registry.database import Base


class ActivityLog(Base):
    """Audit entry describing who did what."""

    __tablename__ = "activity_logs"

    id = Column(Integer, primary_key=True, index=True)
    user_name = Column(String(255), nullable=False)
    action = Column(String(1000), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)

    def __repr__(self):
        return f"<ActivityLog(id={self.id}, user={self.user_name})>"
