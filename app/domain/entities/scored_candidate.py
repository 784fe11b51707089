"""ScoredCandidate — one technician's distance figures for a single resolution."""

from __future__ import annotations

from dataclasses import dataclass

from app.domain.entities.technician import Technician
from app.domain.value_objects.coordinate import Coordinate
from app.domain.value_objects.enums import Precision

KM_TO_MILES = 0.621371


def _miles(km: float | None) -> float | None:
    return km * KM_TO_MILES if km is not None else None


@dataclass
class ScoredCandidate:
    """Transient scoring record, created and discarded within one request."""

    technician: Technician
    coordinate: Coordinate
    straight_km: float
    effective_factor: float
    effective_km: float
    eta: str
    drive_km: float | None = None
    drive_min: float | None = None

    @property
    def precision(self) -> Precision:
        return self.coordinate.precision

    @property
    def has_driving_data(self) -> bool:
        return self.drive_km is not None and self.drive_min is not None

    @property
    def straight_miles(self) -> float:
        return self.straight_km * KM_TO_MILES

    @property
    def effective_miles(self) -> float:
        return self.effective_km * KM_TO_MILES

    @property
    def drive_miles(self) -> float | None:
        return _miles(self.drive_km)
