"""Location endpoints."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from asset_registry.api.deps import get_actor, get_db
from asset_registry.schemas.catalog import CatalogEntryCreate, CatalogEntryResponse
from asset_registry.services.actor import Actor
from asset_registry.services.catalog_service import add_location, list_locations
from asset_registry.services.errors import DuplicateNameError

router = APIRouter()


@router.get("/", response_model=List[CatalogEntryResponse])
def get_locations(db: Session = Depends(get_db)):
    """List all locations ordered by name."""
    return list_locations(db)


@router.post("/", response_model=CatalogEntryResponse, status_code=status.HTTP_201_CREATED)
def create_location(
    location_data: CatalogEntryCreate,
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_actor),
):
    """
    Add a location.

    - **name**: Location name, unique regardless of case
    """
    try:
        return add_location(db, location_data.name, actor)
    except DuplicateNameError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
