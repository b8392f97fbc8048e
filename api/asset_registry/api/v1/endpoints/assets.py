"""Asset endpoints."""

import logging
from datetime import date, datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from asset_registry.api.deps import get_actor, get_db
from asset_registry.schemas.asset import (
    AssetCreate,
    AssetListResponse,
    AssetResponse,
    AssetUpdate,
    NextIdResponse,
)
from asset_registry.schemas.valuation import ValuationResponse
from asset_registry.services import asset_service
from asset_registry.services.actor import Actor
from asset_registry.services.errors import (
    AssetNotFoundError,
    DuplicateAssetIdError,
    EmptyExportError,
    PermissionDeniedError,
)
from asset_registry.services.excel_export import XLSX_MEDIA_TYPE, export_assets_to_excel
from asset_registry.services.identifier import next_asset_id
from asset_registry.services.pdf_export import PDF_MEDIA_TYPE, render_inventory_report, render_qr_label

router = APIRouter()
logger = logging.getLogger(__name__)


def _attachment(content: bytes, media_type: str, filename: str) -> Response:
    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


def _get_or_404(db: Session, asset_id: int):
    try:
        return asset_service.get_asset(db, asset_id)
    except AssetNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/", response_model=AssetListResponse)
def list_assets(
    page: int = Query(1, description="Page number", ge=1),
    size: int = Query(20, description="Page size", ge=1, le=100),
    category: Optional[str] = Query(None, description="Filter by category"),
    status_filter: Optional[str] = Query(None, alias="status", description="Filter by status"),
    location: Optional[str] = Query(None, description="Filter by location"),
    search: Optional[str] = Query(None, description="Search in name and description"),
    db: Session = Depends(get_db),
):
    """List assets with pagination and filters."""
    try:
        assets, total = asset_service.list_assets(
            db,
            page=page,
            size=size,
            category=category,
            status=status_filter,
            location=location,
            search=search,
        )
        today = date.today()
        return AssetListResponse(
            items=[asset_service.asset_to_response(asset, today) for asset in assets],
            total=total,
            page=page,
            size=size,
            pages=(total + size - 1) // size,
        )

    except Exception as e:
        logger.error(f"List assets failed: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to list assets: {str(e)}",
        )


@router.post("/", response_model=AssetResponse, status_code=status.HTTP_201_CREATED)
def create_asset(
    asset_data: AssetCreate,
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_actor),
):
    """
    Create a new asset.

    - **id**: Optional explicit id (e.g. from a pre-printed QR tag); allocated otherwise
    - **name**, **category**, **status**, **location**: Required
    - **initial_cost**: Must be greater than 0
    - **annual_depreciation_rate**: 0 to 100 percent (default: 0)
    - **acquisition_date**: Not in the future (default: today)
    """
    try:
        asset = asset_service.create_asset(db, asset_data, actor)
    except DuplicateAssetIdError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return asset_service.asset_to_response(asset)


@router.get("/next-id", response_model=NextIdResponse)
def preview_next_id(db: Session = Depends(get_db)):
    """Preview the id the next created asset would receive."""
    allocation = next_asset_id(db)
    return NextIdResponse(next_id=allocation.value, is_fallback=allocation.is_fallback)


@router.get("/scan", response_model=AssetResponse)
def scan_asset(
    payload: str = Query(..., description="Text read from the asset's QR code", min_length=1),
    db: Session = Depends(get_db),
):
    """Resolve a scanned QR payload to an asset."""
    try:
        asset = asset_service.find_asset_by_qr_payload(db, payload)
    except AssetNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return asset_service.asset_to_response(asset)


@router.get("/export.xlsx")
def export_excel(db: Session = Depends(get_db)):
    """Download every asset as an Excel workbook."""
    try:
        content = export_assets_to_excel(asset_service.get_all_assets(db))
    except EmptyExportError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    filename = f"asset_report_{datetime.utcnow().strftime('%Y%m%d_%H%M%S')}.xlsx"
    return _attachment(content, XLSX_MEDIA_TYPE, filename)


@router.get("/export.pdf")
def export_pdf(db: Session = Depends(get_db)):
    """Download every asset as a PDF report."""
    try:
        content = render_inventory_report(asset_service.get_all_assets(db))
    except EmptyExportError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    filename = f"asset_report_{datetime.utcnow().strftime('%Y%m%d_%H%M%S')}.pdf"
    return _attachment(content, PDF_MEDIA_TYPE, filename)


@router.get("/{asset_id}", response_model=AssetResponse)
def get_asset(asset_id: int, db: Session = Depends(get_db)):
    """Get asset by ID with its valuation as of today."""
    return asset_service.asset_to_response(_get_or_404(db, asset_id))


@router.get("/{asset_id}/valuation", response_model=ValuationResponse)
def get_asset_valuation(
    asset_id: int,
    as_of: Optional[date] = Query(None, description="Valuation date (default: today)"),
    db: Session = Depends(get_db),
):
    """Straight-line valuation of an asset at a given date."""
    asset = _get_or_404(db, asset_id)
    as_of = as_of or date.today()
    return ValuationResponse.from_result(asset_service.valuate_asset(asset, as_of), as_of=as_of)


@router.get("/{asset_id}/qr-label.pdf")
def get_qr_label(asset_id: int, db: Session = Depends(get_db)):
    """Printable PDF label with the asset's QR code."""
    asset = _get_or_404(db, asset_id)
    try:
        content = render_qr_label(asset)
    except Exception as e:
        logger.error(f"Failed to render QR label for asset {asset_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to render QR label: {str(e)}",
        )
    return _attachment(content, PDF_MEDIA_TYPE, f"asset_{asset.id}_qr.pdf")


@router.put("/{asset_id}", response_model=AssetResponse)
def update_asset(
    asset_id: int,
    asset_data: AssetUpdate,
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_actor),
):
    """
    Update asset.

    All fields are optional. **acquisition_date** and
    **annual_depreciation_rate** can only be changed by admins.
    """
    try:
        asset = asset_service.update_asset(db, asset_id, asset_data, actor)
    except AssetNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except PermissionDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    return asset_service.asset_to_response(asset)


@router.delete("/{asset_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_asset(
    asset_id: int,
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_actor),
):
    """Delete asset."""
    try:
        asset_service.delete_asset(db, asset_id, actor)
    except AssetNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
