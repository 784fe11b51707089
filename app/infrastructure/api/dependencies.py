"""FastAPI dependency injection — wires adapters into use cases."""

from __future__ import annotations

import logging

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.csv_loader.repositories import (
    CsvPostalRegionRepository,
    CsvTechnicianRepository,
)
from app.adapters.geocoder.caching_geocoder import CachingGeocoder
from app.adapters.geocoder.nominatim_adapter import NominatimAdapter
from app.adapters.geocoder.ors_geocoder_adapter import OrsGeocoderAdapter
from app.adapters.persistence.database import get_session
from app.adapters.persistence.repositories import (
    SqlPostalRegionRepository,
    SqlTechnicianRepository,
)
from app.adapters.routing.ors_matrix_adapter import OrsMatrixAdapter
from app.application.ports.geocoder_port import GeocoderPort
from app.application.ports.postal_region_repo import PostalRegionRepository
from app.application.ports.routing_matrix_port import RoutingMatrixPort
from app.application.ports.technician_repo import TechnicianRepository
from app.application.use_cases.find_closest import (
    DispatchTicketUseCase,
    FindClosestTechUseCase,
)
from app.config import settings

logger = logging.getLogger(__name__)


def build_geocoder() -> GeocoderPort:
    choice = settings.geocoder.strip().lower()
    if settings.ors_api_key and choice in ("auto", "ors"):
        logger.info("Using OpenRouteService for geocoding")
        inner: GeocoderPort = OrsGeocoderAdapter()
    else:
        if choice == "ors":
            logger.warning("GEOCODER=ors but ORS_API_KEY is not set, falling back to Nominatim")
        inner = NominatimAdapter()
    return CachingGeocoder(inner)


# Process-wide adapters; the geocode cache lives as long as the process
_geocoder_adapter = build_geocoder()
_router_adapter: RoutingMatrixPort | None = (
    OrsMatrixAdapter(geocoder=_geocoder_adapter) if settings.ors_api_key else None
)
if _router_adapter is None:
    logger.warning("ORS_API_KEY not set — closest-tech lookups will use estimates only")


def get_router_adapter() -> RoutingMatrixPort | None:
    return _router_adapter


def get_technician_repo(session: AsyncSession = Depends(get_session)) -> TechnicianRepository:
    if settings.roster_source.lower() == "csv":
        return CsvTechnicianRepository(settings.roster_csv_path)
    return SqlTechnicianRepository(session)


def get_postal_region_repo(session: AsyncSession = Depends(get_session)) -> PostalRegionRepository:
    if settings.roster_source.lower() == "csv":
        return CsvPostalRegionRepository(settings.postal_region_csv_path or None)
    return SqlPostalRegionRepository(session)


def get_find_closest_uc(
    router: RoutingMatrixPort | None = Depends(get_router_adapter),
) -> FindClosestTechUseCase:
    return FindClosestTechUseCase(
        router=router,
        candidate_limit=settings.dispatch_candidate_limit,
        shortlist_size=settings.dispatch_shortlist_size,
    )


def get_dispatch_ticket_uc(
    engine: FindClosestTechUseCase = Depends(get_find_closest_uc),
    technician_repo: TechnicianRepository = Depends(get_technician_repo),
    postal_region_repo: PostalRegionRepository = Depends(get_postal_region_repo),
) -> DispatchTicketUseCase:
    return DispatchTicketUseCase(
        engine=engine,
        technician_repo=technician_repo,
        postal_region_repo=postal_region_repo,
    )
