"""Nominatim geocoder adapter — implements GeocoderPort."""

from __future__ import annotations

import asyncio
import logging

import httpx

from app.application.ports.geocoder_port import GeocoderPort
from app.config import settings
from app.domain.value_objects.geo_point import GeoPoint

logger = logging.getLogger(__name__)

NOMINATIM_URL = "https://nominatim.openstreetmap.org/search"


class NominatimAdapter(GeocoderPort):
    """Structured postal-code search against OpenStreetMap Nominatim.

    The public instance allows about one request at a time, so concurrent
    lookups queue on a semaphore (NOMINATIM_MAX_CONCURRENCY).
    """

    def __init__(
        self,
        user_agent: str | None = None,
        timeout: float | None = None,
        base_url: str = NOMINATIM_URL,
        transport: httpx.AsyncBaseTransport | None = None,
        max_concurrency: int | None = None,
    ):
        self._user_agent = user_agent or settings.geocoder_user_agent
        self._timeout = timeout or settings.http_timeout_seconds
        self._url = base_url
        self._transport = transport
        self._slots = asyncio.Semaphore(max(1, max_concurrency or settings.nominatim_max_concurrency))

    async def geocode_postal(self, postal: str, country_code: str) -> GeoPoint | None:
        if not postal:
            return None

        try:
            async with self._slots, httpx.AsyncClient(transport=self._transport) as client:
                response = await client.get(
                    self._url,
                    params={
                        "postalcode": postal,
                        "countrycodes": country_code.lower(),
                        "format": "json",
                        "limit": 1,
                    },
                    headers={"User-Agent": self._user_agent, "Accept-Language": "en"},
                    timeout=self._timeout,
                )
                response.raise_for_status()
                results = response.json()

            if not results:
                logger.info("Nominatim returned no results for postal '%s' (%s)", postal, country_code)
                return None

            point = GeoPoint(latitude=float(results[0]["lat"]), longitude=float(results[0]["lon"]))
            logger.info("Nominatim resolved '%s' → (%f, %f)", postal, point.latitude, point.longitude)
            return point

        except (httpx.HTTPError, ValueError, KeyError, IndexError, TypeError):
            logger.exception("Nominatim API error for postal '%s'", postal)
            return None
