"""Liveness endpoint."""

from fastapi import APIRouter

router = APIRouter()


@router.get("/healthz")
async def healthz():
    """Liveness check; does not touch the database (see /health)."""
    return {"status": "ok"}
