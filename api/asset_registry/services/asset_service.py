"""Asset business logic service."""

import logging
from datetime import date
from decimal import Decimal
from typing import List, Optional, Tuple

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from asset_registry.config import settings
from asset_registry.models.asset import Asset
from asset_registry.schemas.asset import AssetCreate, AssetResponse, AssetUpdate
from asset_registry.schemas.valuation import ValuationResponse
from asset_registry.services.activity_log import record_activity
from asset_registry.services.actor import Actor
from asset_registry.services.depreciation import DepreciationResult, compute_depreciation
from asset_registry.services.errors import (
    AssetNotFoundError,
    DuplicateAssetIdError,
    PermissionDeniedError,
)
from asset_registry.services.identifier import next_asset_id, record_assigned_id

logger = logging.getLogger(__name__)

ADMIN_ONLY_FIELDS = ("acquisition_date", "annual_depreciation_rate")

# Columns that can't be cleared by sending null
REQUIRED_FIELDS = (
    "name",
    "category",
    "status",
    "location",
    "quantity",
    "acquisition_date",
    "initial_cost",
)


def create_asset(
    db: Session,
    data: AssetCreate,
    actor: Actor,
    max_retries: Optional[int] = None,
) -> Asset:
    """Create an asset, allocating its id unless one was supplied.

    Allocated ids are inserted optimistically; if a concurrent creation took
    the same id, the maximum is re-read and the insert retried.

    Args:
        db: Database session
        data: Validated asset fields
        actor: Caller performing the creation
        max_retries: Extra attempts after an id collision (defaults to settings)

    Returns:
        Created Asset

    Raises:
        DuplicateAssetIdError: If the supplied id is taken, or no free id
            could be allocated within the retry budget
    """
    values = data.model_dump(exclude={"id"})
    if values.get("annual_depreciation_rate") is None:
        values["annual_depreciation_rate"] = Decimal("0")

    if data.id is not None:
        if db.get(Asset, data.id) is not None:
            raise DuplicateAssetIdError(f"Asset {data.id} already exists")
        asset = Asset(id=data.id, **values)
        db.add(asset)
        try:
            record_assigned_id(db, data.id)
            db.commit()
        except IntegrityError:
            db.rollback()
            raise DuplicateAssetIdError(f"Asset {data.id} already exists")
    else:
        retries = settings.id_allocation_retries if max_retries is None else max_retries
        asset = None
        for attempt in range(retries + 1):
            allocation = next_asset_id(db)
            if allocation.is_fallback:
                logger.warning(f"Using fallback asset id {allocation.value}, uniqueness is best-effort")

            candidate = Asset(id=allocation.value, **values)
            db.add(candidate)
            try:
                record_assigned_id(db, allocation.value)
                db.commit()
            except IntegrityError:
                db.rollback()
                logger.warning(
                    f"Asset id {allocation.value} was taken concurrently "
                    f"(attempt {attempt + 1}/{retries + 1})"
                )
                continue
            asset = candidate
            break

        if asset is None:
            raise DuplicateAssetIdError(f"Could not allocate a free asset id after {retries + 1} attempts")

    db.refresh(asset)
    logger.info(f"Asset {asset.id} created by {actor.name}")
    record_activity(db, actor.name, f"Created asset {asset.id} ({asset.name})")
    return asset


def get_asset(db: Session, asset_id: int) -> Asset:
    """
    Get asset by ID.

    Raises:
        AssetNotFoundError: If asset not found
    """
    asset = db.get(Asset, asset_id)
    if asset is None:
        raise AssetNotFoundError(f"Asset {asset_id} not found")
    return asset


def list_assets(
    db: Session,
    page: int = 1,
    size: int = 20,
    category: Optional[str] = None,
    status: Optional[str] = None,
    location: Optional[str] = None,
    search: Optional[str] = None,
) -> Tuple[List[Asset], int]:
    """List assets with pagination and filters.

    ``category``, ``status`` and ``location`` match exactly; ``search`` is a
    case-insensitive substring match on name and description.

    Returns:
        Tuple of (assets in page, total matching)
    """
    query = db.query(Asset)

    if category:
        query = query.filter(Asset.category == category)
    if status:
        query = query.filter(Asset.status == status)
    if location:
        query = query.filter(Asset.location == location)
    if search:
        pattern = f"%{search.strip()}%"
        query = query.filter(or_(Asset.name.ilike(pattern), Asset.description.ilike(pattern)))

    total = query.count()
    offset = (page - 1) * size
    assets = (
        query.order_by(Asset.registration_timestamp.desc(), Asset.id.desc())
        .offset(offset)
        .limit(size)
        .all()
    )
    return assets, total


def get_all_assets(db: Session) -> List[Asset]:
    """All assets ordered by id."""
    return db.query(Asset).order_by(Asset.id).all()


def _effective_changes(changes: dict) -> dict:
    """Values an update will actually write.

    Nulls for required columns are dropped and a null rate means 0.
    """
    effective = {}
    for field, value in changes.items():
        if value is None:
            if field in REQUIRED_FIELDS:
                continue
            if field == "annual_depreciation_rate":
                value = Decimal("0")
        effective[field] = value
    return effective


def update_asset(db: Session, asset_id: int, data: AssetUpdate, actor: Actor) -> Asset:
    """Apply a partial update.

    Only admins may change the acquisition date or depreciation rate.
    The id and registration timestamp never change.

    Raises:
        AssetNotFoundError: If asset not found
        PermissionDeniedError: If a non-admin changes an admin-only field
    """
    asset = get_asset(db, asset_id)
    changes = _effective_changes(data.model_dump(exclude_unset=True))

    if not actor.is_admin:
        for field in ADMIN_ONLY_FIELDS:
            if field in changes and changes[field] != getattr(asset, field):
                raise PermissionDeniedError(f"Only admins can change {field}")

    for field, value in changes.items():
        setattr(asset, field, value)

    db.commit()
    db.refresh(asset)
    logger.info(f"Asset {asset.id} updated by {actor.name}: {sorted(changes)}")
    record_activity(db, actor.name, f"Updated asset {asset.id} ({asset.name})")
    return asset


def delete_asset(db: Session, asset_id: int, actor: Actor) -> None:
    """Delete asset by ID. No soft delete, no cascade.

    Raises:
        AssetNotFoundError: If asset not found
    """
    asset = get_asset(db, asset_id)
    name = asset.name
    db.delete(asset)
    db.commit()
    logger.info(f"Asset {asset_id} deleted by {actor.name}")
    record_activity(db, actor.name, f"Deleted asset {asset_id} ({name})")


def qr_payload(asset: Asset) -> str:
    """Text encoded in an asset's QR tag."""
    return str(asset.id)


def find_asset_by_qr_payload(db: Session, payload: str) -> Asset:
    """Resolve a scanned QR payload to an asset.

    Raises:
        AssetNotFoundError: If the payload is not an asset id or no asset matches
    """
    text = (payload or "").strip()
    if not text.isdigit():
        raise AssetNotFoundError(f"QR payload {payload!r} is not an asset id")
    return get_asset(db, int(text))


def valuate_asset(asset: Asset, as_of: Optional[date] = None) -> DepreciationResult:
    """Depreciated value of an asset as of a date (today by default)."""
    return compute_depreciation(
        asset.initial_cost,
        asset.annual_depreciation_rate,
        asset.acquisition_date,
        as_of or date.today(),
    )


def asset_to_response(asset: Asset, as_of: Optional[date] = None) -> AssetResponse:
    """Build the API response for an asset, including its valuation."""
    as_of = as_of or date.today()
    response = AssetResponse.model_validate(asset)
    response.valuation = ValuationResponse.from_result(valuate_asset(asset, as_of), as_of=as_of)
    return response
