"""DistanceEstimate — road-curvature penalty and ETA text."""

from __future__ import annotations

import math

from app.domain.reference.tables import DEFAULT_REGION_PENALTY
from app.domain.value_objects.coordinate import Coordinate
from app.domain.value_objects.enums import Precision

# Extra multiplier when the technician side is only known to region precision
TECH_REGION_PENALTY = 1.8

FACTOR_MIN = 1.0
FACTOR_MAX = 12.0

NO_ETA = "—"


def clamp(value: float, low: float, high: float) -> float:
    """Clamp to [low, high]; non-finite input collapses to *low*."""
    try:
        value = float(value)
    except (TypeError, ValueError):
        return low
    if not math.isfinite(value):
        return low
    return max(low, min(high, value))


def effective_factor(
    base_factor: float,
    ticket: Coordinate,
    tech: Coordinate,
    region_penalties: dict[str, float] | None = None,
    default_penalty: float = DEFAULT_REGION_PENALTY,
) -> float:
    """Heuristic straight-line → road-distance multiplier.

    Centroid coordinates understate real driving distance far more than
    exact points do, and two coarse endpoints compound multiplicatively:

      1. start at *base_factor*;
      2. ticket at region precision → × the region's curvature penalty
         (*default_penalty* for regions not in the table);
      3. technician at region precision → × 1.8;
      4. clamp to [1, 12].
    """
    factor = base_factor
    if ticket.precision == Precision.REGION:
        penalties = region_penalties or {}
        factor *= penalties.get(ticket.region, default_penalty)
    if tech.precision == Precision.REGION:
        factor *= TECH_REGION_PENALTY
    return clamp(factor, FACTOR_MIN, FACTOR_MAX)


def eta_from_km(km: float, speed_kmh: float) -> str:
    """ETA text for *km* at an assumed average *speed_kmh*."""
    if not math.isfinite(km) or not math.isfinite(speed_kmh) or speed_kmh <= 0:
        return NO_ETA
    return eta_from_minutes(km / speed_kmh * 60)


def eta_from_minutes(minutes: float | None) -> str:
    """ETA text for a duration in minutes: ``"2h 5m"`` or ``"45 min"``."""
    if minutes is None or not math.isfinite(minutes):
        return NO_ETA
    # Half-up rounding: 0.5 → 1
    total = max(0, math.floor(minutes + 0.5))
    hours, rest = divmod(total, 60)
    if hours <= 0:
        return f"{total} min"
    return f"{hours}h {rest}m"
