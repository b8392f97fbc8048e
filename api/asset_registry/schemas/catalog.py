"""Category and location schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CatalogEntryCreate(BaseModel):
    """Schema for adding a category or location."""

    name: str = Field(..., min_length=1, max_length=255)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name is required")
        return v


class CatalogEntryResponse(BaseModel):
    """Schema for category or location response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    created_at: datetime
