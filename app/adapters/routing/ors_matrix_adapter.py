"""OpenRouteService matrix adapter — implements RoutingMatrixPort."""

from __future__ import annotations

import asyncio
import logging
import math

import httpx

from app.application.ports.geocoder_port import GeocoderPort
from app.application.ports.routing_matrix_port import MatrixResult, RoutingMatrixPort
from app.config import settings
from app.domain.errors import ErrorCategory
from app.domain.policies.postal_format import get_postal_format
from app.domain.value_objects.enums import Jurisdiction
from app.domain.value_objects.geo_point import GeoPoint

logger = logging.getLogger(__name__)

MATRIX_PROFILE = "driving-car"


def _as_number(value: object) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value) if math.isfinite(value) else None


class OrsMatrixAdapter(RoutingMatrixPort):
    """Driving distance / duration from one postal code to many.

    Pipeline:
    1. Geocode the origin; failure aborts with an error result.
    2. Geocode destinations concurrently; failures become None at their index.
    3. One batched matrix request for the geocoded destinations.
    4. Expand the response back to the caller's index positions.

    Service errors never escape as exceptions; the caller decides how to
    degrade from an error result.
    """

    def __init__(
        self,
        geocoder: GeocoderPort,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        max_destinations: int | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._geocoder = geocoder
        self._api_key = api_key if api_key is not None else settings.ors_api_key
        self._base_url = (base_url or settings.ors_base_url).rstrip("/")
        self._timeout = timeout or settings.http_timeout_seconds
        self._max_destinations = max_destinations or settings.routing_max_destinations
        self._transport = transport

    async def matrix(
        self,
        origin_postal: str,
        destination_postals: list[str],
        jurisdiction: Jurisdiction,
    ) -> MatrixResult:
        if not self._api_key:
            return MatrixResult.failure("Routing disabled: ORS API key is not set")

        if len(destination_postals) > self._max_destinations:
            return MatrixResult.failure(
                f"Too many destinations: {len(destination_postals)} > {self._max_destinations}"
            )

        postal_format = get_postal_format(jurisdiction)
        country = postal_format.country_code

        origin = postal_format.normalize(origin_postal)
        if not origin:
            return MatrixResult.failure(f"Invalid origin postal: {origin_postal!r}")
        if not destination_postals:
            return MatrixResult()

        origin_point = await self._geocode(origin, country)
        if origin_point is None:
            return MatrixResult.failure(f"Could not geocode origin postal {origin}")

        destinations = [postal_format.normalize(p) for p in destination_postals]
        points = await asyncio.gather(*(self._geocode(p, country) for p in destinations))

        valid = [(index, point) for index, point in enumerate(points) if point is not None]
        if not valid:
            return MatrixResult.failure("Could not geocode any destination postal")
        if len(valid) < len(points):
            logger.info(
                "%s: %d of %d destinations resolved for origin %s",
                ErrorCategory.PARTIAL_GEOCODE_FAILURE.value, len(valid), len(points), origin,
            )

        try:
            distances_row, durations_row = await self._request_matrix(
                origin_point, [point for _, point in valid]
            )
        except httpx.HTTPStatusError as e:
            logger.warning("ORS matrix returned HTTP %d", e.response.status_code)
            return MatrixResult.failure(f"ORS matrix failed: HTTP {e.response.status_code}")
        except httpx.HTTPError as e:
            logger.warning("ORS matrix transport error: %s", e)
            return MatrixResult.failure(f"ORS matrix transport error: {e}")
        except (ValueError, KeyError, IndexError, TypeError) as e:
            logger.warning("ORS matrix returned a malformed body: %s", e)
            return MatrixResult.failure("ORS matrix returned a malformed response")

        distances_km: list[float | None] = [None] * len(destination_postals)
        durations_min: list[float | None] = [None] * len(destination_postals)
        for j, (index, _) in enumerate(valid):
            distance = _as_number(distances_row[j]) if j < len(distances_row) else None
            duration = _as_number(durations_row[j]) if j < len(durations_row) else None
            distances_km[index] = distance
            durations_min[index] = duration / 60 if duration is not None else None

        return MatrixResult(distances_km=distances_km, durations_min=durations_min)

    async def _geocode(self, postal: str | None, country: str) -> GeoPoint | None:
        if not postal:
            return None
        try:
            return await self._geocoder.geocode_postal(postal, country)
        except Exception:
            # One bad destination must not sink the batch
            logger.exception("Geocoder raised for postal '%s'", postal)
            return None

    async def _request_matrix(
        self,
        origin: GeoPoint,
        destinations: list[GeoPoint],
    ) -> tuple[list, list]:
        """POST the matrix request; returns the origin's (distances, durations) rows."""
        locations = [[origin.longitude, origin.latitude]] + [
            [p.longitude, p.latitude] for p in destinations
        ]
        body = {
            "locations": locations,
            "sources": [0],
            "destinations": list(range(1, len(locations))),
            "metrics": ["distance", "duration"],
            "units": "km",
        }

        async with httpx.AsyncClient(transport=self._transport) as client:
            response = await client.post(
                f"{self._base_url}/v2/matrix/{MATRIX_PROFILE}",
                json=body,
                headers={"Authorization": self._api_key},
                timeout=self._timeout,
            )
            response.raise_for_status()
            data = response.json()

        distances = data["distances"][0]
        durations = data["durations"][0]
        if not isinstance(distances, list) or not isinstance(durations, list):
            raise ValueError("matrix rows are not lists")
        return distances, durations
