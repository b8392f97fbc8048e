"""Activity log service."""

import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from asset_registry.models.activity_log import ActivityLog

logger = logging.getLogger(__name__)


def record_activity(db: Session, user_name: str, action: str) -> bool:
    """Write an audit entry.

    Best-effort: a failed write is logged and rolled back, never raised, so
    it cannot fail the operation being audited.

    Returns:
        True if the entry was stored
    """
    try:
        db.add(ActivityLog(user_name=user_name, action=action))
        db.commit()
        return True
    except SQLAlchemyError as e:
        logger.warning(f"Failed to store activity log entry '{action}' for {user_name}: {e}")
        db.rollback()
        return False


def list_recent_activity(db: Session, limit: int = 50) -> List[ActivityLog]:
    """Most recent audit entries first."""
    return (
        db.query(ActivityLog)
        .order_by(ActivityLog.created_at.desc(), ActivityLog.id.desc())
        .limit(limit)
        .all()
    )
