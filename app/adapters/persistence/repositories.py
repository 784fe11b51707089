"""SQLAlchemy repository implementations."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.persistence.models import PostalRegionModel, TechnicianModel
from app.application.ports.postal_region_repo import PostalRegionRepository
from app.application.ports.technician_repo import TechnicianRepository
from app.domain.entities.technician import Technician

# ─── Mappers ─────────────────────────────────────────────────────────


def _technician_to_domain(m: TechnicianModel) -> Technician:
    return Technician(
        id=m.tech_id,
        name=m.name,
        city=m.city or "",
        region=(m.region or "").upper(),
        postal=(m.postal or "").replace(" ", "").upper(),
    )


# ─── Repositories ────────────────────────────────────────────────────


class SqlTechnicianRepository(TechnicianRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_all(self) -> list[Technician]:
        result = await self._session.execute(select(TechnicianModel).order_by(TechnicianModel.id))
        return [_technician_to_domain(m) for m in result.scalars().all()]


class SqlPostalRegionRepository(PostalRegionRepository):
    """Reads the optional postal_regions table.

    An empty table means the mapping is disabled.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_mapping(self) -> dict[str, str] | None:
        result = await self._session.execute(select(PostalRegionModel))
        rows = result.scalars().all()
        if not rows:
            return None
        return {m.postal.replace(" ", "").upper(): m.region.upper() for m in rows}
