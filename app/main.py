"""Closest-Tech Dispatch — FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.adapters.persistence.database import engine
from app.config import settings
from app.infrastructure.api.routes_dispatch import router as dispatch_router
from app.infrastructure.api.routes_health import router as health_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    if settings.roster_source.lower() == "database":
        try:
            async with engine.begin():
                pass  # Connection pool warmed up
            logger.info("Database connection established")
        except Exception as e:
            logger.warning("Database not available on startup: %s", e)
    else:
        logger.info("Roster source: %s", settings.roster_csv_path)
    yield
    await engine.dispose()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Closest-Tech Dispatch",
        description="Routes dispatch tickets to the nearest available technician",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    # Register routers
    app.include_router(health_router, prefix="/api")
    app.include_router(dispatch_router, prefix="/api")

    return app


app = create_app()
