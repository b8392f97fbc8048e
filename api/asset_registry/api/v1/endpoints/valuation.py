"""Stateless valuation endpoint."""

from datetime import date

from fastapi import APIRouter

from asset_registry.schemas.valuation import ValuationRequest, ValuationResponse
from asset_registry.services.depreciation import compute_depreciation, to_date

router = APIRouter()


@router.post("", response_model=ValuationResponse)
def calculate_valuation(request: ValuationRequest):
    """
    Compute straight-line depreciation without storing anything.

    Missing or non-numeric cost or rate mean no depreciation; an unreadable
    acquisition date means no elapsed time and an unreadable as_of means today.
    """
    as_of = to_date(request.as_of) or date.today()
    result = compute_depreciation(
        request.initial_cost,
        request.annual_depreciation_rate,
        request.acquisition_date,
        as_of,
    )
    return ValuationResponse.from_result(result, as_of=as_of)
