"""Dashboard schemas."""

from decimal import Decimal
from typing import Dict, Optional

from pydantic import BaseModel, Field


class DashboardStats(BaseModel):
    """Aggregate inventory statistics, weighted by quantity."""

    total_invested: Decimal = Field(..., description="Sum of initial cost times quantity")
    total_current_value: Decimal = Field(..., description="Sum of depreciated value times quantity")
    total_units: int
    by_category: Dict[str, int]
    by_status: Dict[str, int]
    by_location: Dict[str, int]
    top_location: Optional[str] = None
