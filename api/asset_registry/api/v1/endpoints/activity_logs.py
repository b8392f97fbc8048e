"""Activity log endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from asset_registry.api.deps import get_db
from asset_registry.config import settings
from asset_registry.schemas.activity_log import ActivityLogResponse
from asset_registry.services.activity_log import list_recent_activity

router = APIRouter()


@router.get("/", response_model=List[ActivityLogResponse])
def list_logs(
    limit: Optional[int] = Query(None, description="Maximum entries", ge=1, le=500),
    db: Session = Depends(get_db),
):
    """Most recent activity first."""
    return list_recent_activity(db, limit or settings.recent_log_limit)
