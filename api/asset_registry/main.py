"""Main FastAPI application."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from asset_registry.api.v1 import api_router
from asset_registry.config import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    from asset_registry.database import init_db

    init_db()
    logger.info(f"Asset registry started ({settings.environment})")
    yield


app = FastAPI(
    title="Asset Registry Service",
    description="Inventory tracking with QR tagging, depreciation and exports",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # TODO: restrict to the mobile client's origins once deployed
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API router
app.include_router(api_router, prefix="/v1")


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    from asset_registry.database import engine
    from sqlalchemy import text

    db_status = "disconnected"
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
            db_status = "connected"
    except Exception as e:
        db_status = f"error: {str(e)}"

    return {
        "status": "ok" if db_status == "connected" else "degraded",
        "db": db_status,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "asset_registry.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
