"""Dispatch endpoints: closest technician lookup plus postal and matrix helpers."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from app.application.ports.routing_matrix_port import RoutingMatrixPort
from app.application.use_cases.find_closest import (
    ClosestTechResult,
    DispatchTicketUseCase,
    ResolutionFailure,
)
from app.config import settings
from app.domain.entities.scored_candidate import ScoredCandidate
from app.domain.policies.postal_format import PostalFormat, get_postal_format
from app.domain.value_objects.dispatch_options import DispatchOptions
from app.domain.value_objects.enums import Jurisdiction
from app.infrastructure.api.dependencies import get_dispatch_ticket_uc, get_router_adapter

router = APIRouter(prefix="/dispatch", tags=["dispatch"])

# ── Request schemas ─────────────────────────────────────────────────


class ClosestTechRequest(BaseModel):
    ticket: str = Field(..., description="Postal code or free ticket text containing one")
    jurisdiction: Jurisdiction | None = None
    base_factor: float | None = None
    speed_kmh: float | None = None


class MatrixRequest(BaseModel):
    ticket_postal: str
    tech_postals: list[str]
    jurisdiction: Jurisdiction | None = None


def _jurisdiction(value: Jurisdiction | None) -> Jurisdiction:
    return value or Jurisdiction(settings.dispatch_jurisdiction.upper())


# ── Endpoints ───────────────────────────────────────────────────────


@router.post("/closest")
async def find_closest(
    body: ClosestTechRequest,
    uc: DispatchTicketUseCase = Depends(get_dispatch_ticket_uc),
):
    """Rank the roster against the ticket location and return best + shortlist."""
    options = DispatchOptions.from_input(
        body.base_factor,
        body.speed_kmh,
        default_base_factor=settings.dispatch_base_factor,
        default_speed_kmh=settings.dispatch_speed_kmh,
    )
    jurisdiction = _jurisdiction(body.jurisdiction)
    result = await uc.execute(body.ticket, options=options, jurisdiction=jurisdiction)

    if isinstance(result, ResolutionFailure):
        return JSONResponse(status_code=422, content=_serialize_failure(result))

    return _serialize_result(result, options, get_postal_format(jurisdiction))


@router.get("/postal")
async def lookup_postal(text: str, jurisdiction: Jurisdiction | None = None):
    """Normalize (or extract) a postal code and report its derived region."""
    postal_format = get_postal_format(_jurisdiction(jurisdiction))
    postal = postal_format.parse(text)
    if not postal:
        raise HTTPException(status_code=422, detail="No valid postal code found")

    return {
        "postal": postal,
        "formatted": postal_format.format(postal),
        "region": postal_format.derive_region(postal) or None,
    }


@router.post("/matrix")
async def driving_matrix(
    body: MatrixRequest,
    routing: RoutingMatrixPort | None = Depends(get_router_adapter),
):
    """Driving distance (km) / duration (min) from the ticket to each tech postal."""
    if routing is None:
        return JSONResponse(
            status_code=503,
            content={"ok": False, "error": "Missing ORS_API_KEY environment variable"},
        )
    if not body.ticket_postal.strip() or not body.tech_postals:
        raise HTTPException(status_code=400, detail="ticket_postal and tech_postals are required")

    result = await routing.matrix(body.ticket_postal, body.tech_postals, _jurisdiction(body.jurisdiction))
    return {
        "ok": result.ok,
        "distances_km": result.distances_km,
        "durations_min": result.durations_min,
        "error": result.error,
    }


# ── Serializers ─────────────────────────────────────────────────────


def _round(value: float | None, digits: int = 1) -> float | None:
    return round(value, digits) if value is not None else None


def _serialize_candidate(c: ScoredCandidate, postal_format: PostalFormat) -> dict:
    tech = c.technician
    return {
        "tech_id": tech.id,
        "name": tech.name,
        "city": tech.city,
        "region": tech.region,
        "postal": tech.postal,
        "postal_display": postal_format.format(tech.postal) or tech.postal,
        "precision": c.precision.value,
        "straight_km": _round(c.straight_km),
        "straight_miles": _round(c.straight_miles),
        "effective_factor": _round(c.effective_factor, 2),
        "effective_km": _round(c.effective_km),
        "effective_miles": _round(c.effective_miles),
        "drive_km": _round(c.drive_km),
        "drive_miles": _round(c.drive_miles),
        "drive_min": _round(c.drive_min),
        "eta": c.eta,
    }


def _serialize_result(
    r: ClosestTechResult,
    options: DispatchOptions,
    postal_format: PostalFormat,
) -> dict:
    location = r.ticket_location.point
    return {
        "status": "ok",
        "mode": r.mode.value,
        "ticket_postal": r.ticket_postal,
        "ticket_postal_display": r.ticket_postal_display,
        "ticket_location": {
            "latitude": location.latitude if location else None,
            "longitude": location.longitude if location else None,
            "precision": r.ticket_location.precision.value,
            "region": r.ticket_location.region or None,
        },
        "best": _serialize_candidate(r.best, postal_format),
        "shortlist": [_serialize_candidate(c, postal_format) for c in r.shortlist],
        "roster_size": r.roster_size,
        "resolved_count": r.resolved_count,
        "base_factor": options.base_factor,
        "speed_kmh": options.speed_kmh,
        "gateway_error": r.gateway_error,
        "trace": [state.value for state in r.trace],
    }


def _serialize_failure(f: ResolutionFailure) -> dict:
    return {
        "status": "error",
        "reason": f.reason.value,
        "category": f.category.value,
        "message": f.message,
        "trace": [state.value for state in f.trace],
    }
