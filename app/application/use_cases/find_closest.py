"""FindClosestTechUseCase — rank a technician roster against a ticket location."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

from app.application.ports.postal_region_repo import PostalRegionRepository
from app.application.ports.routing_matrix_port import RoutingMatrixPort
from app.application.ports.technician_repo import TechnicianRepository
from app.domain.entities.scored_candidate import ScoredCandidate
from app.domain.entities.technician import Technician
from app.domain.errors import (
    DispatchError,
    ErrorCategory,
    FailureReason,
    GatewayError,
    InvalidInputError,
    UnresolvedLocationError,
)
from app.domain.policies.distance_estimate import (
    effective_factor,
    eta_from_km,
    eta_from_minutes,
)
from app.domain.policies.location_resolution import GeolocationResolver
from app.domain.policies.postal_format import PostalFormat, get_postal_format
from app.domain.policies.ranking import (
    DEFAULT_CANDIDATE_LIMIT,
    DEFAULT_SHORTLIST_SIZE,
    driving_candidates,
    pick_best,
    rank_by_driving,
    rank_by_straight_line,
    shortlist,
)
from app.domain.reference.tables import ReferenceTables, get_reference_tables
from app.domain.value_objects.coordinate import Coordinate
from app.domain.value_objects.dispatch_options import DispatchOptions
from app.domain.value_objects.enums import Jurisdiction, ResolutionState, RoutingMode

logger = logging.getLogger(__name__)


@dataclass
class ClosestTechResult:
    """Successful resolution: best technician plus a ranked shortlist."""

    mode: RoutingMode
    best: ScoredCandidate
    shortlist: list[ScoredCandidate]
    ticket_postal: str
    ticket_postal_display: str
    ticket_location: Coordinate
    roster_size: int
    resolved_count: int
    gateway_error: str | None = None
    trace: list[ResolutionState] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return True


@dataclass
class ResolutionFailure:
    """Terminal failure of one resolution request."""

    reason: FailureReason
    category: ErrorCategory
    message: str
    trace: list[ResolutionState] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return False


class FindClosestTechUseCase:
    """Closest-technician resolution engine.

    Pipeline:
    1. Normalize the ticket postal (direct entry first, then free-text scan)
    2. Resolve the ticket coordinate
    3. Resolve and straight-line score every technician (baseline ranking)
    4. Send the top-K to the routing gateway and re-rank by driving time
    5. On any gateway problem keep the baseline ranking (estimate mode)
    """

    def __init__(
        self,
        router: RoutingMatrixPort | None = None,
        candidate_limit: int = DEFAULT_CANDIDATE_LIMIT,
        shortlist_size: int = DEFAULT_SHORTLIST_SIZE,
        tables: dict[Jurisdiction, ReferenceTables] | None = None,
    ):
        self._router = router
        self._candidate_limit = candidate_limit
        self._shortlist_size = shortlist_size
        self._tables = tables or {}

    async def execute(
        self,
        ticket_input: str,
        roster: list[Technician],
        options: DispatchOptions | None = None,
        jurisdiction: Jurisdiction = Jurisdiction.CA,
        postal_regions: dict[str, str] | None = None,
    ) -> ClosestTechResult | ResolutionFailure:
        options = options or DispatchOptions()
        postal_format = get_postal_format(jurisdiction)
        tables = self._tables.get(postal_format.jurisdiction) or get_reference_tables(
            postal_format.jurisdiction
        )
        trace = [ResolutionState.IDLE]

        try:
            trace.append(ResolutionState.NORMALIZING_POSTAL)
            postal = self._ticket_postal(ticket_input, postal_format)

            trace.append(ResolutionState.RESOLVING_TICKET)
            resolver = GeolocationResolver.for_roster(
                postal_format, tables, roster, postal_regions=postal_regions
            )
            ticket_location = resolver.resolve(postal)
            if not ticket_location.is_resolved:
                raise UnresolvedLocationError(
                    FailureReason.UNRESOLVED_TICKET,
                    f"Unable to resolve location for ticket postal code {postal_format.format(postal)}.",
                )

            trace.append(ResolutionState.SCORING_ROSTER)
            baseline = self._score_roster(resolver, ticket_location, roster, options)

        except DispatchError as e:
            trace.append(ResolutionState.FAILED)
            logger.info("Resolution failed (%s): %s", e.reason.value, e.message)
            return ResolutionFailure(
                reason=e.reason, category=e.category, message=e.message, trace=trace
            )

        mode, ranked, gateway_error = await self._rank(postal, baseline, postal_format, trace)
        trace.append(ResolutionState.RANKED)

        best = pick_best(ranked, prefer_driving=mode == RoutingMode.DRIVING)
        trace.append(ResolutionState.DONE)

        logger.info(
            "Ticket %s → %s (%s, %.1f km straight-line, mode=%s)",
            postal, best.technician.name, best.technician.id, best.straight_km, mode.value,
        )

        return ClosestTechResult(
            mode=mode,
            best=best,
            shortlist=shortlist(ranked, self._shortlist_size),
            ticket_postal=postal,
            ticket_postal_display=postal_format.format(postal) or postal,
            ticket_location=ticket_location,
            roster_size=len(roster),
            resolved_count=len(baseline),
            gateway_error=gateway_error,
            trace=trace,
        )

    @staticmethod
    def _ticket_postal(ticket_input: str, postal_format: PostalFormat) -> str:
        postal = postal_format.parse(ticket_input)
        if not postal:
            raise InvalidInputError(
                FailureReason.NO_VALID_POSTAL,
                f"No valid {postal_format.jurisdiction.value} postal code found.",
            )
        return postal

    @staticmethod
    def _score_roster(
        resolver: GeolocationResolver,
        ticket_location: Coordinate,
        roster: list[Technician],
        options: DispatchOptions,
    ) -> list[ScoredCandidate]:
        """Baseline straight-line ranking over every resolvable technician."""
        if not roster:
            raise InvalidInputError(FailureReason.EMPTY_ROSTER, "Technician roster is empty.")

        tables = resolver.tables
        scored: list[ScoredCandidate] = []
        for tech in roster:
            location = resolver.resolve(tech.postal, tech.city, tech.region)
            if not location.is_resolved:
                logger.debug("Skipping technician %s: postal %r unresolved", tech.id, tech.postal)
                continue

            straight_km = ticket_location.distance_km(location)
            factor = effective_factor(
                options.base_factor,
                ticket_location,
                location,
                tables.region_penalties,
                tables.default_penalty,
            )
            effective_km = straight_km * factor
            scored.append(
                ScoredCandidate(
                    technician=tech,
                    coordinate=location,
                    straight_km=straight_km,
                    effective_factor=factor,
                    effective_km=effective_km,
                    eta=eta_from_km(effective_km, options.speed_kmh),
                )
            )

        if not scored:
            raise UnresolvedLocationError(
                FailureReason.NO_RESOLVED_TECHNICIANS, "No tech locations available."
            )
        return rank_by_straight_line(scored)

    async def _rank(
        self,
        postal: str,
        baseline: list[ScoredCandidate],
        postal_format: PostalFormat,
        trace: list[ResolutionState],
    ) -> tuple[RoutingMode, list[ScoredCandidate], str | None]:
        """Driving re-rank of the top-K, or the baseline when routing is unavailable."""
        if self._router is None:
            trace.append(ResolutionState.ESTIMATE_FALLBACK)
            return RoutingMode.ESTIMATE, baseline, "Routing gateway not configured"

        trace.append(ResolutionState.ROUTING_ATTEMPT)
        candidates = driving_candidates(baseline, self._candidate_limit)
        try:
            routed = await self._apply_driving(postal, candidates, postal_format)
        except Exception as e:
            logger.warning("Driving routing failed for %s; using estimate: %s", postal, e)
            trace.append(ResolutionState.ESTIMATE_FALLBACK)
            return RoutingMode.ESTIMATE, baseline, str(e)

        return RoutingMode.DRIVING, rank_by_driving(routed), None

    async def _apply_driving(
        self,
        postal: str,
        candidates: list[ScoredCandidate],
        postal_format: PostalFormat,
    ) -> list[ScoredCandidate]:
        result = await self._router.matrix(
            postal,
            [c.technician.postal for c in candidates],
            postal_format.jurisdiction,
        )
        if not result.ok:
            raise GatewayError(result.error)
        if len(result.distances_km) != len(candidates) or len(result.durations_min) != len(candidates):
            raise GatewayError(
                f"Routing result misaligned: {len(result.distances_km)} rows for {len(candidates)} candidates"
            )
        if all(d is None for d in result.distances_km) and all(d is None for d in result.durations_min):
            raise GatewayError("Routing returned no driving data")

        return [
            replace(
                candidate,
                drive_km=drive_km,
                drive_min=drive_min,
                eta=eta_from_minutes(drive_min) if drive_min is not None else candidate.eta,
            )
            for candidate, drive_km, drive_min in zip(
                candidates, result.distances_km, result.durations_min
            )
        ]


class DispatchTicketUseCase:
    """Loads the roster and optional postal → region mapping, then runs the engine."""

    def __init__(
        self,
        engine: FindClosestTechUseCase,
        technician_repo: TechnicianRepository,
        postal_region_repo: PostalRegionRepository | None = None,
    ):
        self._engine = engine
        self._technicians = technician_repo
        self._postal_regions = postal_region_repo

    async def execute(
        self,
        ticket_input: str,
        options: DispatchOptions | None = None,
        jurisdiction: Jurisdiction = Jurisdiction.CA,
    ) -> ClosestTechResult | ResolutionFailure:
        roster = await self._technicians.get_all()
        mapping = await self._load_postal_regions()
        logger.info(
            "Dispatching ticket against %d technicians (postal mapping: %s)",
            len(roster), "on" if mapping else "off",
        )
        return await self._engine.execute(
            ticket_input,
            roster,
            options=options,
            jurisdiction=jurisdiction,
            postal_regions=mapping,
        )

    async def _load_postal_regions(self) -> dict[str, str] | None:
        """An unavailable mapping degrades to prefix-derived regions."""
        if self._postal_regions is None:
            return None
        try:
            return await self._postal_regions.get_mapping()
        except Exception:
            logger.exception("Postal → region mapping unavailable; using prefix rules")
            return None
