"""Tests for the postal geocoder adapters (httpx.MockTransport, no network)."""

import asyncio

import httpx
import pytest

from app.adapters.geocoder.caching_geocoder import CachingGeocoder
from app.adapters.geocoder.nominatim_adapter import NominatimAdapter
from app.adapters.geocoder.ors_geocoder_adapter import OrsGeocoderAdapter
from app.application.ports.geocoder_port import GeocoderPort
from app.domain.value_objects.geo_point import GeoPoint


def _transport(handler, requests=None):
    def wrapped(request: httpx.Request) -> httpx.Response:
        if requests is not None:
            requests.append(request)
        return handler(request)

    return httpx.MockTransport(wrapped)


# ─── Nominatim ───────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_nominatim_structured_postal_query():
    requests = []
    adapter = NominatimAdapter(
        user_agent="test-agent",
        transport=_transport(
            lambda r: httpx.Response(200, json=[{"lat": "45.4215", "lon": "-75.6972"}]),
            requests,
        ),
    )
    point = await adapter.geocode_postal("K1A0B1", "CA")

    assert point == GeoPoint(latitude=45.4215, longitude=-75.6972)
    params = requests[0].url.params
    assert params["postalcode"] == "K1A0B1"
    assert params["countrycodes"] == "ca"
    assert params["limit"] == "1"
    assert requests[0].headers["User-Agent"] == "test-agent"


@pytest.mark.asyncio
async def test_nominatim_no_results():
    adapter = NominatimAdapter(transport=_transport(lambda r: httpx.Response(200, json=[])))
    assert await adapter.geocode_postal("K1A0B1", "CA") is None


@pytest.mark.asyncio
async def test_nominatim_http_error_returns_none():
    adapter = NominatimAdapter(transport=_transport(lambda r: httpx.Response(503)))
    assert await adapter.geocode_postal("K1A0B1", "CA") is None


@pytest.mark.asyncio
async def test_nominatim_malformed_body_returns_none():
    adapter = NominatimAdapter(
        transport=_transport(lambda r: httpx.Response(200, json=[{"lat": "north"}]))
    )
    assert await adapter.geocode_postal("K1A0B1", "CA") is None


@pytest.mark.asyncio
async def test_nominatim_connect_error_returns_none():
    def boom(request):
        raise httpx.ConnectError("unreachable", request=request)

    adapter = NominatimAdapter(transport=httpx.MockTransport(boom))
    assert await adapter.geocode_postal("K1A0B1", "CA") is None


@pytest.mark.asyncio
async def test_nominatim_empty_postal_skips_request():
    requests = []
    adapter = NominatimAdapter(transport=_transport(lambda r: httpx.Response(200, json=[]), requests))
    assert await adapter.geocode_postal("", "CA") is None
    assert requests == []


class _InFlight:
    """Async handler that records the peak number of overlapping requests."""

    def __init__(self):
        self.current = 0
        self.peak = 0

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.current += 1
        self.peak = max(self.peak, self.current)
        await asyncio.sleep(0.01)
        self.current -= 1
        return httpx.Response(200, json=[{"lat": "45.0", "lon": "-75.0"}])


@pytest.mark.asyncio
async def test_nominatim_serializes_concurrent_lookups():
    handler = _InFlight()
    adapter = NominatimAdapter(transport=httpx.MockTransport(handler), max_concurrency=1)

    postals = ["K1A0B1", "M5V2T6", "H2X1Y4", "T2P1J9", "V6B1A1"]
    points = await asyncio.gather(*(adapter.geocode_postal(p, "CA") for p in postals))

    assert all(p is not None for p in points)
    assert handler.peak == 1


@pytest.mark.asyncio
async def test_nominatim_concurrency_limit_is_configurable():
    handler = _InFlight()
    adapter = NominatimAdapter(transport=httpx.MockTransport(handler), max_concurrency=2)

    await asyncio.gather(*(adapter.geocode_postal(f"K1A0B{i}", "CA") for i in range(6)))
    assert handler.peak == 2


# ─── ORS geocoder ────────────────────────────────────────────────────


def _feature(lon, lat):
    return {"features": [{"geometry": {"type": "Point", "coordinates": [lon, lat]}}]}


@pytest.mark.asyncio
async def test_ors_geocoder_swaps_lon_lat():
    requests = []
    adapter = OrsGeocoderAdapter(
        api_key="key",
        base_url="https://ors.test",
        transport=_transport(lambda r: httpx.Response(200, json=_feature(-79.38, 43.65)), requests),
    )
    point = await adapter.geocode_postal("M5V2T6", "CA")

    assert point == GeoPoint(latitude=43.65, longitude=-79.38)
    request = requests[0]
    assert request.url.path == "/geocode/search"
    assert request.url.params["text"] == "M5V2T6 Canada"
    assert request.url.params["boundary.country"] == "CA"


@pytest.mark.asyncio
async def test_ors_geocoder_us_query_text():
    requests = []
    adapter = OrsGeocoderAdapter(
        api_key="key",
        transport=_transport(lambda r: httpx.Response(200, json=_feature(-74.0, 40.7)), requests),
    )
    await adapter.geocode_postal("10001", "us")
    assert requests[0].url.params["text"] == "10001 USA"


@pytest.mark.asyncio
async def test_ors_geocoder_without_key_makes_no_request():
    requests = []
    adapter = OrsGeocoderAdapter(
        api_key="",
        transport=_transport(lambda r: httpx.Response(200, json=_feature(0, 0)), requests),
    )
    assert await adapter.geocode_postal("M5V2T6", "CA") is None
    assert requests == []


@pytest.mark.asyncio
async def test_ors_geocoder_no_features():
    adapter = OrsGeocoderAdapter(
        api_key="key",
        transport=_transport(lambda r: httpx.Response(200, json={"features": []})),
    )
    assert await adapter.geocode_postal("M5V2T6", "CA") is None


@pytest.mark.asyncio
async def test_ors_geocoder_http_error():
    adapter = OrsGeocoderAdapter(api_key="key", transport=_transport(lambda r: httpx.Response(403)))
    assert await adapter.geocode_postal("M5V2T6", "CA") is None


# ─── Cache ───────────────────────────────────────────────────────────


class CountingGeocoder(GeocoderPort):
    def __init__(self, result):
        self.result = result
        self.calls = 0

    async def geocode_postal(self, postal, country_code):
        self.calls += 1
        return self.result


@pytest.mark.asyncio
async def test_cache_deduplicates_equivalent_keys():
    inner = CountingGeocoder(GeoPoint(43.65, -79.38))
    geocoder = CachingGeocoder(inner)

    r1 = await geocoder.geocode_postal("M5V 2T6", "ca")
    r2 = await geocoder.geocode_postal("m5v2t6", "CA")

    assert r1 == r2
    assert inner.calls == 1
    assert len(geocoder) == 1


@pytest.mark.asyncio
async def test_cache_separates_countries():
    inner = CountingGeocoder(GeoPoint(1.0, 1.0))
    geocoder = CachingGeocoder(inner)
    await geocoder.geocode_postal("10001", "US")
    await geocoder.geocode_postal("10001", "CA")
    assert inner.calls == 2


@pytest.mark.asyncio
async def test_cache_does_not_store_misses():
    inner = CountingGeocoder(None)
    geocoder = CachingGeocoder(inner)

    assert await geocoder.geocode_postal("K1A0B1", "CA") is None
    assert await geocoder.geocode_postal("K1A0B1", "CA") is None
    assert inner.calls == 2
    assert len(geocoder) == 0
