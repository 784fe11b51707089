"""Health check endpoint."""

from pathlib import Path

from fastapi import APIRouter
from sqlalchemy import text

from app.adapters.persistence.database import async_session_factory
from app.config import settings

router = APIRouter(tags=["health"])


async def _roster_status() -> str:
    if settings.roster_source.lower() == "csv":
        path = Path(settings.roster_csv_path)
        return f"csv: {path.name}" if path.exists() else f"error: {path} not found"

    try:
        async with async_session_factory() as session:
            await session.execute(text("SELECT 1"))
        return "database: connected"
    except Exception as e:
        return f"error: {e}"


@router.get("/health")
async def health_check():
    """Check roster source and routing availability."""
    roster_status = await _roster_status()

    return {
        "status": "degraded" if roster_status.startswith("error") else "ok",
        "roster": roster_status,
        "routing": "enabled" if settings.ors_api_key else "estimate-only",
        "jurisdiction": settings.dispatch_jurisdiction.upper(),
        "service": "Closest-Tech Dispatch",
    }
