"""Asset schemas."""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from asset_registry.schemas.valuation import ValuationResponse


def normalize_asset_name(value: Optional[str]) -> Optional[str]:
    """Validate an asset name and title-case each word.

    Names are letters and single spaces only.

    Examples:
        >>> normalize_asset_name("  laptop  DELL ")
        'Laptop Dell'
    """
    if value is None:
        return None
    words = value.split()
    if not words:
        raise ValueError("name is required")
    for word in words:
        if not word.isalpha():
            raise ValueError("name may only contain letters and spaces")
    return " ".join(word[:1].upper() + word[1:].lower() for word in words)


def require_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    if not value:
        raise ValueError("field is required")
    return value


def check_not_future(value: Optional[date]) -> Optional[date]:
    if value is not None and value > date.today():
        raise ValueError("acquisition date cannot be in the future")
    return value


class AssetBase(BaseModel):
    """Base asset schema."""

    name: str = Field(..., description="Asset name (letters and spaces)")
    category: str = Field(..., description="Category name")
    status: str = Field(..., description="Current status, e.g. Active, In maintenance, Retired")
    location: str = Field(..., description="Location name")
    description: Optional[str] = None
    observation: Optional[str] = None
    quantity: int = Field(1, description="Number of units", ge=1)
    acquisition_date: date = Field(default_factory=date.today, description="Acquisition date")
    initial_cost: Decimal = Field(..., description="Acquisition cost", gt=0)
    assigned_user_id: Optional[int] = None
    assigned_user_name: Optional[str] = None


class AssetCreate(AssetBase):
    """Schema for creating an asset.

    ``id`` is normally allocated by the server. It may be supplied when the
    asset was tagged in advance (for example from a scanned QR code).
    """

    id: Optional[int] = Field(None, description="Explicit asset id", gt=0)
    annual_depreciation_rate: Optional[Decimal] = Field(
        None, description="Annual depreciation rate in percent", ge=0, le=100
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return normalize_asset_name(v)

    @field_validator("category", "status", "location")
    @classmethod
    def validate_required_text(cls, v):
        return require_text(v)

    @field_validator("acquisition_date")
    @classmethod
    def validate_acquisition_date(cls, v):
        return check_not_future(v)


class AssetUpdate(BaseModel):
    """Schema for updating an asset.

    ``acquisition_date`` and ``annual_depreciation_rate`` can only be changed
    by admins.
    """

    name: Optional[str] = None
    category: Optional[str] = None
    status: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    observation: Optional[str] = None
    quantity: Optional[int] = Field(None, ge=1)
    acquisition_date: Optional[date] = None
    initial_cost: Optional[Decimal] = Field(None, gt=0)
    annual_depreciation_rate: Optional[Decimal] = Field(None, ge=0, le=100)
    assigned_user_id: Optional[int] = None
    assigned_user_name: Optional[str] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return normalize_asset_name(v)

    @field_validator("category", "status", "location")
    @classmethod
    def validate_required_text(cls, v):
        return require_text(v)

    @field_validator("acquisition_date")
    @classmethod
    def validate_acquisition_date(cls, v):
        return check_not_future(v)


class AssetResponse(AssetBase):
    """Schema for asset response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    annual_depreciation_rate: Decimal
    registration_timestamp: datetime
    updated_at: datetime
    valuation: Optional[ValuationResponse] = Field(None, description="Valuation as of today")


class AssetListResponse(BaseModel):
    """Response for listing assets."""

    items: List[AssetResponse] = Field(..., description="Assets in this page")
    total: int = Field(..., description="Total assets matching filters")
    page: int = Field(..., description="Current page")
    size: int = Field(..., description="Page size")
    pages: int = Field(..., description="Total pages")


class NextIdResponse(BaseModel):
    """Preview of the next id allocation."""

    next_id: int
    is_fallback: bool = Field(..., description="True when derived from the clock")
