"""API v1 router."""

from fastapi import APIRouter

from asset_registry.api.v1.endpoints import (
    activity_logs,
    assets,
    categories,
    dashboard,
    health,
    locations,
    users,
    valuation,
)

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(assets.router, prefix="/assets", tags=["assets"])
api_router.include_router(categories.router, prefix="/categories", tags=["categories"])
api_router.include_router(locations.router, prefix="/locations", tags=["locations"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(activity_logs.router, prefix="/logs", tags=["logs"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
api_router.include_router(valuation.router, prefix="/valuation", tags=["valuation"])
