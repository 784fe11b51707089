"""ReferenceTables — read-only lookup data for one jurisdiction."""

from __future__ import annotations

from dataclasses import dataclass, field

from app.domain.reference import canada, usa
from app.domain.value_objects.enums import Jurisdiction
from app.domain.value_objects.geo_point import GeoPoint

DEFAULT_REGION_PENALTY = 6.0


@dataclass(frozen=True)
class ReferenceTables:
    """Static centroid / city / penalty tables.

    Built once per process and shared across requests; nothing mutates them
    after construction.
    """

    jurisdiction: Jurisdiction
    region_centroids: dict[str, GeoPoint] = field(default_factory=dict)
    city_coordinates: dict[tuple[str, str], GeoPoint] = field(default_factory=dict)
    region_penalties: dict[str, float] = field(default_factory=dict)
    default_penalty: float = DEFAULT_REGION_PENALTY

    def region_centroid(self, region: str) -> GeoPoint | None:
        return self.region_centroids.get(region.strip().upper()) if region else None

    def city_coordinate(self, city: str, region: str) -> GeoPoint | None:
        if not city or not region:
            return None
        return self.city_coordinates.get((city.strip().upper(), region.strip().upper()))


CANADA_TABLES = ReferenceTables(
    jurisdiction=Jurisdiction.CA,
    region_centroids=canada.REGION_CENTROIDS,
    city_coordinates=canada.CITY_COORDINATES,
    region_penalties=canada.REGION_PENALTIES,
)

USA_TABLES = ReferenceTables(
    jurisdiction=Jurisdiction.US,
    region_centroids=usa.REGION_CENTROIDS,
    city_coordinates=usa.CITY_COORDINATES,
    region_penalties=usa.REGION_PENALTIES,
)

_TABLES: dict[Jurisdiction, ReferenceTables] = {
    Jurisdiction.CA: CANADA_TABLES,
    Jurisdiction.US: USA_TABLES,
}


def get_reference_tables(jurisdiction: Jurisdiction) -> ReferenceTables:
    return _TABLES[Jurisdiction(jurisdiction)]
