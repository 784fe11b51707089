"""File-backed roster and postal-mapping repositories."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from app.adapters.csv_loader.loader import load_postal_regions, load_technicians
from app.application.ports.postal_region_repo import PostalRegionRepository
from app.application.ports.technician_repo import TechnicianRepository
from app.domain.entities.technician import Technician

logger = logging.getLogger(__name__)


class CsvTechnicianRepository(TechnicianRepository):
    """Re-reads the file on each call so edits apply to the next request."""

    def __init__(self, file_path: Path | str):
        self._path = Path(file_path)

    async def get_all(self) -> list[Technician]:
        return await asyncio.to_thread(load_technicians, self._path)


class CsvPostalRegionRepository(PostalRegionRepository):
    def __init__(self, file_path: Path | str | None):
        self._path = Path(file_path) if file_path else None

    async def get_mapping(self) -> dict[str, str] | None:
        if self._path is None:
            return None
        if not self._path.exists():
            logger.warning("Postal mapping file %s not found; mapping disabled", self._path)
            return None
        return await asyncio.to_thread(load_postal_regions, self._path)
