"""User schemas."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class UserPlaceholderCreate(BaseModel):
    """Schema for recording a person without an account."""

    name: str = Field(..., min_length=1, max_length=255)


class UserAccountUpgrade(BaseModel):
    """Schema for turning a placeholder into a real account."""

    email: str = Field(..., min_length=3, max_length=255)
    role: Literal["admin", "user"] = "user"
    name: Optional[str] = None


class UserResponse(BaseModel):
    """Schema for user response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: Optional[str] = None
    role: Optional[str] = None
    is_account: bool
    created_at: datetime
