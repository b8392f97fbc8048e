"""Business logic services."""

from asset_registry.services.depreciation import DepreciationResult, compute_depreciation
from asset_registry.services.identifier import IdAllocation, allocate_next_id, next_asset_id

__all__ = [
    "DepreciationResult",
    "compute_depreciation",
    "IdAllocation",
    "allocate_next_id",
    "next_asset_id",
]
