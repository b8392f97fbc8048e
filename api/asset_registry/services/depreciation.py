"""Straight-line depreciation calculator."""

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Optional

logger = logging.getLogger(__name__)

DAYS_PER_YEAR = Decimal("365.25")
CENTS = Decimal("0.01")
ZERO = Decimal("0")
HUNDRED = Decimal("100")


@dataclass(frozen=True)
class DepreciationResult:
    """Valuation of an asset at a given date."""

    elapsed_years: int
    total_depreciation: Decimal
    current_value: Decimal


def to_decimal(value: Any) -> Optional[Decimal]:
    """Coerce a user-supplied number to Decimal.

    Returns None for None, blanks, booleans and anything non-numeric
    (including NaN and infinities).

    Examples:
        >>> to_decimal("12.5")
        Decimal('12.5')
        >>> to_decimal("abc") is None
        True
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        result = value
    else:
        text = str(value).strip()
        if not text:
            return None
        try:
            result = Decimal(text)
        except (InvalidOperation, ValueError):
            return None
    if not result.is_finite():
        return None
    return result


def to_date(value: Any) -> Optional[date]:
    """Coerce a date, datetime or ISO 'YYYY-MM-DD' string to a date."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip()[:10])
    except ValueError:
        return None


def elapsed_full_years(start: date, end: date) -> int:
    """Whole years between two dates, floored and never negative."""
    days = (end - start).days
    if days <= 0:
        return 0
    return math.floor(Decimal(days) / DAYS_PER_YEAR)


def compute_depreciation(
    initial_cost: Any,
    annual_rate: Any,
    acquisition_date: Any,
    as_of: Any = None,
) -> DepreciationResult:
    """Compute the straight-line depreciated value of an asset.

    elapsed_years = floor(days between acquisition_date and as_of / 365.25)
    total_depreciation = initial_cost * annual_rate / 100 * elapsed_years
    current_value = max(initial_cost - total_depreciation, 0)

    The function never raises: a missing or non-numeric cost or rate means no
    depreciation, and a missing date means no elapsed time.

    Args:
        initial_cost: Acquisition cost
        annual_rate: Annual depreciation rate as a percentage (0-100)
        acquisition_date: Date the depreciation clock starts
        as_of: Valuation date (defaults to today)

    Returns:
        DepreciationResult

    Examples:
        >>> r = compute_depreciation(1000, 10, "2020-01-01", "2023-01-01")
        >>> (r.elapsed_years, r.total_depreciation, r.current_value)
        (3, Decimal('300.00'), Decimal('700.00'))
    """
    cost = to_decimal(initial_cost)
    rate = to_decimal(annual_rate)

    if cost is None or rate is None:
        current = max(cost, ZERO) if cost is not None else ZERO
        return DepreciationResult(
            elapsed_years=0,
            total_depreciation=ZERO.quantize(CENTS),
            current_value=current.quantize(CENTS, rounding=ROUND_HALF_UP),
        )

    cost = max(cost, ZERO)
    rate = min(max(rate, ZERO), HUNDRED)

    start = to_date(acquisition_date)
    end = to_date(as_of) or date.today()
    if start is None:
        logger.debug(f"Unusable acquisition date {acquisition_date!r}, assuming no elapsed time")
        years = 0
    else:
        years = elapsed_full_years(start, end)

    total = cost * (rate / HUNDRED) * years
    current = max(cost - total, ZERO)

    return DepreciationResult(
        elapsed_years=years,
        total_depreciation=total.quantize(CENTS, rounding=ROUND_HALF_UP),
        current_value=current.quantize(CENTS, rounding=ROUND_HALF_UP),
    )
