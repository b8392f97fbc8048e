"""Dashboard statistics service."""

from collections import Counter
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from sqlalchemy.orm import Session

from asset_registry.models.asset import Asset
from asset_registry.schemas.dashboard import DashboardStats
from asset_registry.services.asset_service import get_all_assets
from asset_registry.services.depreciation import compute_depreciation, to_decimal

UNCATEGORIZED = "Other"
UNKNOWN_STATUS = "Unknown"
NO_LOCATION = "No location"


def summarize_assets(assets: Iterable[Asset], as_of: Optional[date] = None) -> DashboardStats:
    """Aggregate totals and distributions, weighting each asset by quantity."""
    as_of = as_of or date.today()
    invested = Decimal("0")
    current = Decimal("0")
    units = 0
    by_category: Counter = Counter()
    by_status: Counter = Counter()
    by_location: Counter = Counter()

    for asset in assets:
        qty = asset.quantity or 1
        cost = to_decimal(asset.initial_cost) or Decimal("0")
        valuation = compute_depreciation(
            asset.initial_cost, asset.annual_depreciation_rate, asset.acquisition_date, as_of
        )

        invested += cost * qty
        current += valuation.current_value * qty
        units += qty
        by_category[asset.category or UNCATEGORIZED] += qty
        by_status[asset.status or UNKNOWN_STATUS] += qty
        by_location[asset.location or NO_LOCATION] += qty

    top = by_location.most_common(1)

    return DashboardStats(
        total_invested=invested,
        total_current_value=current,
        total_units=units,
        by_category=dict(by_category),
        by_status=dict(by_status),
        by_location=dict(by_location),
        top_location=top[0][0] if top else None,
    )


def get_dashboard_stats(db: Session, as_of: Optional[date] = None) -> DashboardStats:
    """Statistics over every asset in the registry."""
    return summarize_assets(get_all_assets(db), as_of)
