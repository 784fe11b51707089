"""CachingGeocoder — process-lifetime cache in front of any GeocoderPort."""

from __future__ import annotations

import logging

from app.application.ports.geocoder_port import GeocoderPort
from app.domain.value_objects.geo_point import GeoPoint

logger = logging.getLogger(__name__)


class CachingGeocoder(GeocoderPort):
    """Memoizes successful lookups keyed by (country, normalized postal).

    Misses are not cached so a transient outage does not stick. Concurrent
    requests may both fetch the same code; the last write wins, which is
    harmless because the answer is the same.
    """

    def __init__(self, inner: GeocoderPort):
        self._inner = inner
        self._cache: dict[tuple[str, str], GeoPoint] = {}

    def __len__(self) -> int:
        return len(self._cache)

    async def geocode_postal(self, postal: str, country_code: str) -> GeoPoint | None:
        key = (country_code.upper(), postal.strip().upper().replace(" ", ""))
        if key in self._cache:
            logger.debug("Cache hit for postal '%s'", postal)
            return self._cache[key]

        point = await self._inner.geocode_postal(postal, country_code)
        if point is not None:
            self._cache[key] = point
        return point
