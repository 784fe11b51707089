"""DispatchOptions — operator-tunable knobs for a single resolution."""

from __future__ import annotations

import math
from dataclasses import dataclass

DEFAULT_BASE_FACTOR = 1.25
DEFAULT_SPEED_KMH = 80.0

BASE_FACTOR_BOUNDS = (0.8, 5.0)
SPEED_KMH_BOUNDS = (20.0, 130.0)


def _bounded(value: object, default: float, bounds: tuple[float, float]) -> float:
    """Coerce to float and clamp; anything non-numeric falls back to *default*."""
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return default
    if not math.isfinite(number) or number == 0:
        return default
    low, high = bounds
    return max(low, min(high, number))


@dataclass(frozen=True)
class DispatchOptions:
    base_factor: float = DEFAULT_BASE_FACTOR
    speed_kmh: float = DEFAULT_SPEED_KMH

    @classmethod
    def from_input(
        cls,
        base_factor: object = None,
        speed_kmh: object = None,
        *,
        default_base_factor: float = DEFAULT_BASE_FACTOR,
        default_speed_kmh: float = DEFAULT_SPEED_KMH,
    ) -> DispatchOptions:
        """Build options from raw operator input, clamping to the allowed ranges.

        A missing, zero or unparseable value falls back to the default, the same
        way an empty form field does.
        """
        return cls(
            base_factor=_bounded(base_factor, default_base_factor, BASE_FACTOR_BOUNDS),
            speed_kmh=_bounded(speed_kmh, default_speed_kmh, SPEED_KMH_BOUNDS),
        )
