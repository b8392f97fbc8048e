"""Asset identifier allocation."""

import logging
import math
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from asset_registry.models.asset import Asset
from asset_registry.models.id_counter import IdCounter
from asset_registry.services.depreciation import to_decimal

logger = logging.getLogger(__name__)

ASSET_SEQUENCE = "assets"


@dataclass(frozen=True)
class IdAllocation:
    """An allocated asset id.

    ``is_fallback`` is True when the id was derived from the clock because
    the stored maximum could not be read. Such ids are best-effort unique.
    """

    value: int
    is_fallback: bool = False

    @property
    def guaranteed(self) -> bool:
        return not self.is_fallback


def fallback_id(clock: Callable[[], float] = time.time) -> int:
    """Timestamp-derived id in milliseconds since the epoch."""
    return int(clock() * 1000)


def allocate_next_id(current_max_id: Any) -> IdAllocation:
    """Return the id that follows the current maximum.

    Args:
        current_max_id: Highest id assigned so far, or None when no assets exist

    Returns:
        IdAllocation with value max + 1, or 1 for an empty registry

    Examples:
        >>> allocate_next_id(None).value
        1
        >>> allocate_next_id(41).value
        42
    """
    if current_max_id is None:
        return IdAllocation(value=1)

    current = to_decimal(current_max_id)
    if current is None:
        logger.warning(f"Stored maximum asset id {current_max_id!r} is not a number, restarting at 1")
        return IdAllocation(value=1)

    return IdAllocation(value=max(math.floor(current), 0) + 1)


def _highest(*values: Any) -> Any:
    """Largest usable numeric value, or the first raw value when none parse."""
    present = [value for value in values if value is not None]
    if not present:
        return None
    numbers = [number for number in (to_decimal(value) for value in present) if number is not None]
    return max(numbers) if numbers else present[0]


def next_asset_id(db: Session, clock: Callable[[], float] = time.time) -> IdAllocation:
    """Allocate the next asset id from the highest id ever assigned.

    Both the live maximum and the stored high-water mark are consulted, so ids
    freed by deleting the newest asset are not handed out again. Any lookup
    failure degrades to a timestamp-derived id instead of blocking asset
    creation.
    """
    try:
        current_max: Optional[int] = db.query(func.max(Asset.id)).scalar()
        high_water: Optional[int] = (
            db.query(IdCounter.high_water).filter(IdCounter.name == ASSET_SEQUENCE).scalar()
        )
    except SQLAlchemyError as e:
        logger.error(f"Failed to read maximum asset id, using timestamp fallback: {e}", exc_info=True)
        db.rollback()
        return IdAllocation(value=fallback_id(clock), is_fallback=True)

    return allocate_next_id(_highest(current_max, high_water))


def record_assigned_id(db: Session, asset_id: int) -> None:
    """Raise the asset high-water mark to ``asset_id``.

    Adds to the caller's transaction without committing, so the mark moves in
    the same commit as the insert that used the id.
    """
    counter = db.get(IdCounter, ASSET_SEQUENCE)
    if counter is None:
        db.add(IdCounter(name=ASSET_SEQUENCE, high_water=asset_id))
    elif counter.high_water is None or asset_id > counter.high_water:
        counter.high_water = asset_id
