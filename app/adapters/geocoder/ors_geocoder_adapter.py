"""OpenRouteService geocoder adapter — implements GeocoderPort."""

from __future__ import annotations

import logging

import httpx

from app.application.ports.geocoder_port import GeocoderPort
from app.config import settings
from app.domain.value_objects.geo_point import GeoPoint

logger = logging.getLogger(__name__)

COUNTRY_NAMES = {"CA": "Canada", "US": "USA"}


class OrsGeocoderAdapter(GeocoderPort):
    """Pelias search via ORS, restricted to one country."""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._api_key = api_key if api_key is not None else settings.ors_api_key
        self._base_url = (base_url or settings.ors_base_url).rstrip("/")
        self._timeout = timeout or settings.http_timeout_seconds
        self._transport = transport

    async def geocode_postal(self, postal: str, country_code: str) -> GeoPoint | None:
        if not self._api_key:
            logger.warning("ORS API key is not set. Skipping geocoding.")
            return None
        if not postal:
            return None

        country = country_code.upper()
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.get(
                    f"{self._base_url}/geocode/search",
                    params={
                        "text": f"{postal} {COUNTRY_NAMES.get(country, country)}",
                        "boundary.country": country,
                        "size": 1,
                        "api_key": self._api_key,
                    },
                    headers={"Authorization": self._api_key},
                    timeout=self._timeout,
                )
                response.raise_for_status()
                data = response.json()

            features = data.get("features") or []
            coords = features[0]["geometry"]["coordinates"] if features else None
            if not coords or len(coords) < 2:
                logger.info("ORS could not resolve postal '%s' (%s)", postal, country)
                return None

            # GeoJSON order is [lon, lat]
            point = GeoPoint(latitude=float(coords[1]), longitude=float(coords[0]))
            logger.info("ORS resolved '%s' → (%f, %f)", postal, point.latitude, point.longitude)
            return point

        except (httpx.HTTPError, ValueError, KeyError, TypeError, AttributeError):
            logger.exception("ORS geocode error for postal '%s'", postal)
            return None
