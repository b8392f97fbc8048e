"""Dashboard endpoints."""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from asset_registry.api.deps import get_db
from asset_registry.schemas.dashboard import DashboardStats
from asset_registry.services.dashboard_service import get_dashboard_stats

router = APIRouter()


@router.get("/", response_model=DashboardStats)
def dashboard(
    as_of: Optional[date] = Query(None, description="Valuation date (default: today)"),
    db: Session = Depends(get_db),
):
    """Totals and distributions by category, status and location."""
    return get_dashboard_stats(db, as_of)
