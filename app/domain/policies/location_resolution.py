"""GeolocationResolver — postal code (+ hints) → Coordinate, tier by tier.

Decision table, first hit wins:

    tier        precondition                                     precision
    ---------   ----------------------------------------------   ---------
    override    normalized postal is in the override table       exact
    city        city hint + region known, (CITY, REGION) listed  city
    region      region known and has a centroid                  region
    (none)      anything else, including an invalid postal       unresolved

The region is the caller's hint when given, else the dynamic postal → region
mapping, else the prefix derivation rule of the postal format.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from app.domain.entities.technician import Technician
from app.domain.policies.postal_format import PostalFormat
from app.domain.reference.tables import ReferenceTables
from app.domain.value_objects.coordinate import Coordinate
from app.domain.value_objects.enums import Precision
from app.domain.value_objects.geo_point import GeoPoint

logger = logging.getLogger(__name__)


def _clean_key(value: str | None) -> str:
    return str(value or "").strip().upper()


def build_postal_overrides(
    roster: Iterable[Technician],
    postal_format: PostalFormat,
    tables: ReferenceTables,
) -> dict[str, GeoPoint]:
    """Exact points for postal codes shared by technicians in a known city.

    A technician whose (city, region) has a curated coordinate lends that
    coordinate to its postal code, so tickets in the same code resolve exactly.
    """
    overrides: dict[str, GeoPoint] = {}
    for tech in roster:
        postal = postal_format.normalize(tech.postal)
        if not postal:
            continue
        point = tables.city_coordinate(tech.city, tech.region)
        if point:
            overrides[postal] = point
    return overrides


class GeolocationResolver:
    """Resolves postal codes for one request.

    Reference tables are shared and read-only; the override table and
    postal → region mapping are fixed at construction.
    """

    def __init__(
        self,
        postal_format: PostalFormat,
        tables: ReferenceTables,
        overrides: dict[str, GeoPoint] | None = None,
        postal_regions: dict[str, str] | None = None,
    ):
        self._format = postal_format
        self._tables = tables
        self._overrides = dict(overrides or {})
        self._postal_regions: dict[str, str] = {}
        for raw_postal, region in (postal_regions or {}).items():
            postal = postal_format.normalize(raw_postal)
            if postal and region:
                self._postal_regions[postal] = _clean_key(region)

    @classmethod
    def for_roster(
        cls,
        postal_format: PostalFormat,
        tables: ReferenceTables,
        roster: Iterable[Technician],
        postal_regions: dict[str, str] | None = None,
    ) -> GeolocationResolver:
        overrides = build_postal_overrides(roster, postal_format, tables)
        logger.debug("Built %d postal overrides from roster", len(overrides))
        return cls(postal_format, tables, overrides=overrides, postal_regions=postal_regions)

    @property
    def postal_format(self) -> PostalFormat:
        return self._format

    @property
    def tables(self) -> ReferenceTables:
        return self._tables

    def region_for(self, postal: str | None, region_hint: str | None = None) -> str:
        """Region code for a postal code, or "" when it cannot be determined."""
        hint = _clean_key(region_hint)
        if hint:
            return hint
        normalized = self._format.normalize(postal)
        if not normalized:
            return ""
        mapped = self._postal_regions.get(normalized)
        if mapped:
            return mapped
        return self._format.derive_region(normalized)

    def resolve(
        self,
        postal: str | None,
        city_hint: str | None = None,
        region_hint: str | None = None,
    ) -> Coordinate:
        normalized = self._format.normalize(postal)
        if not normalized:
            return Coordinate.unresolved()

        region = self.region_for(normalized, region_hint)
        city = _clean_key(city_hint)

        # Tier 1 — curated exact point for this postal code
        point = self._overrides.get(normalized)
        if point:
            return Coordinate(point=point, precision=Precision.EXACT, region=region, city=city)

        # Tier 2 — city centroid
        point = self._tables.city_coordinate(city, region)
        if point:
            return Coordinate(point=point, precision=Precision.CITY, region=region, city=city)

        # Tier 3 — region centroid
        point = self._tables.region_centroid(region)
        if point:
            return Coordinate(point=point, precision=Precision.REGION, region=region)

        return Coordinate.unresolved(region=region, city=city)
