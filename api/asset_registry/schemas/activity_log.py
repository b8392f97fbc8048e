"""Activity log schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class ActivityLogResponse(BaseModel):
    """Schema for activity log entry."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_name: str
    action: str
    created_at: datetime
