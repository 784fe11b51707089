"""Coordinate value object — a GeoPoint tagged with its precision tier."""

from __future__ import annotations

from dataclasses import dataclass

from app.domain.value_objects.enums import Precision
from app.domain.value_objects.geo_point import GeoPoint


@dataclass(frozen=True)
class Coordinate:
    """A resolved location and how much it can be trusted.

    ``region`` and ``city`` are the lookup keys that produced the point
    (uppercased), kept so the penalty model can look up per-region factors.
    """

    point: GeoPoint | None
    precision: Precision
    region: str = ""
    city: str = ""

    def __post_init__(self):
        if self.precision == Precision.UNRESOLVED and self.point is not None:
            raise ValueError("An unresolved coordinate cannot carry a point")
        if self.precision != Precision.UNRESOLVED and self.point is None:
            raise ValueError(f"A {self.precision.value} coordinate requires a point")

    @classmethod
    def unresolved(cls, region: str = "", city: str = "") -> Coordinate:
        return cls(point=None, precision=Precision.UNRESOLVED, region=region, city=city)

    @property
    def is_resolved(self) -> bool:
        return self.precision != Precision.UNRESOLVED

    def distance_km(self, other: Coordinate) -> float:
        if self.point is None or other.point is None:
            raise ValueError("Cannot measure distance to an unresolved coordinate")
        return self.point.haversine_km(other.point)
