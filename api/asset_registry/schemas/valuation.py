"""Valuation schemas."""

from datetime import date
from decimal import Decimal
from typing import Optional, Union

from pydantic import BaseModel, Field

from asset_registry.services.depreciation import DepreciationResult


class ValuationRequest(BaseModel):
    """Inputs for the stateless depreciation calculator.

    All inputs are accepted loosely; unusable values mean no depreciation.
    """

    initial_cost: Union[Decimal, str, None] = Field(None, description="Acquisition cost")
    annual_depreciation_rate: Union[Decimal, str, None] = Field(None, description="Annual rate in percent")
    acquisition_date: Union[date, str, None] = None
    as_of: Union[date, str, None] = Field(None, description="Valuation date, defaults to today")


class ValuationResponse(BaseModel):
    """Straight-line valuation of an asset."""

    elapsed_years: int = Field(..., description="Whole years since acquisition")
    total_depreciation: Decimal
    current_value: Decimal
    as_of: Optional[date] = None

    @classmethod
    def from_result(cls, result: DepreciationResult, as_of: Optional[date] = None) -> "ValuationResponse":
        return cls(
            elapsed_years=result.elapsed_years,
            total_depreciation=result.total_depreciation,
            current_value=result.current_value,
            as_of=as_of,
        )
