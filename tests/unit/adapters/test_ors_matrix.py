"""Tests for OrsMatrixAdapter (fake geocoder + httpx.MockTransport)."""

import json

import httpx
import pytest

from app.adapters.routing.ors_matrix_adapter import OrsMatrixAdapter
from app.application.ports.geocoder_port import GeocoderPort
from app.domain.value_objects.enums import Jurisdiction
from app.domain.value_objects.geo_point import GeoPoint

POINTS = {
    "M5V2T6": GeoPoint(43.64, -79.39),
    "H2X1Y4": GeoPoint(45.51, -73.57),
    "K1A0B1": GeoPoint(45.42, -75.70),
    "T2P1J9": GeoPoint(51.04, -114.07),
}


class DictGeocoder(GeocoderPort):
    def __init__(self, points=POINTS, raise_for=()):
        self._points = points
        self._raise_for = set(raise_for)
        self.calls = []

    async def geocode_postal(self, postal, country_code):
        self.calls.append((postal, country_code))
        if postal in self._raise_for:
            raise RuntimeError("geocoder exploded")
        return self._points.get(postal)


def _matrix_response(distances, durations):
    return lambda request: httpx.Response(
        200, json={"distances": [distances], "durations": [durations]}
    )


def _adapter(handler, geocoder=None, requests=None, **kwargs):
    def wrapped(request):
        if requests is not None:
            requests.append(request)
        return handler(request)

    kwargs.setdefault("api_key", "secret")
    return OrsMatrixAdapter(
        geocoder=geocoder or DictGeocoder(),
        base_url="https://ors.test",
        transport=httpx.MockTransport(wrapped),
        **kwargs,
    )


# ─── Happy path ──────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_matrix_request_shape_and_units():
    requests = []
    adapter = _adapter(_matrix_response([540.2, 120.5], [18000, 5400]), requests=requests)

    result = await adapter.matrix("M5V 2T6", ["H2X1Y4", "K1A0B1"], Jurisdiction.CA)

    assert result.ok
    assert result.distances_km == [540.2, 120.5]
    assert result.durations_min == [300.0, 90.0]

    request = requests[0]
    assert request.method == "POST"
    assert request.url.path == "/v2/matrix/driving-car"
    assert request.headers["Authorization"] == "secret"
    body = json.loads(request.content)
    assert body["locations"][0] == [-79.39, 43.64]
    assert body["sources"] == [0]
    assert body["destinations"] == [1, 2]
    assert body["units"] == "km"


@pytest.mark.asyncio
async def test_ungeocodable_destination_keeps_alignment():
    requests = []
    adapter = _adapter(_matrix_response([500.0, 3400.0], [18000, 120000]), requests=requests)

    result = await adapter.matrix("M5V2T6", ["H2X1Y4", "X0X0X0", "T2P1J9"], Jurisdiction.CA)

    assert result.ok
    assert result.distances_km == [500.0, None, 3400.0]
    assert result.durations_min == [300.0, None, 2000.0]
    assert json.loads(requests[0].content)["destinations"] == [1, 2]


@pytest.mark.asyncio
async def test_null_matrix_entries_become_none():
    adapter = _adapter(_matrix_response([None, 120.0], [None, 3600]))
    result = await adapter.matrix("M5V2T6", ["H2X1Y4", "K1A0B1"], Jurisdiction.CA)

    assert result.distances_km == [None, 120.0]
    assert result.durations_min == [None, 60.0]


@pytest.mark.asyncio
async def test_geocoder_exception_for_one_destination():
    geocoder = DictGeocoder(raise_for={"H2X1Y4"})
    adapter = _adapter(_matrix_response([120.0], [3600]), geocoder=geocoder)

    result = await adapter.matrix("M5V2T6", ["H2X1Y4", "K1A0B1"], Jurisdiction.CA)

    assert result.ok
    assert result.distances_km == [None, 120.0]


@pytest.mark.asyncio
async def test_empty_destinations_is_empty_success():
    requests = []
    adapter = _adapter(_matrix_response([], []), requests=requests)
    result = await adapter.matrix("M5V2T6", [], Jurisdiction.CA)

    assert result.ok
    assert result.distances_km == []
    assert requests == []


@pytest.mark.asyncio
async def test_geocoder_receives_country_code():
    geocoder = DictGeocoder({"10001": GeoPoint(40.75, -73.99), "60601": GeoPoint(41.88, -87.62)})
    adapter = _adapter(_matrix_response([1270.0], [45000]), geocoder=geocoder)

    result = await adapter.matrix("10001-1234", ["60601"], Jurisdiction.US)

    assert result.ok
    assert ("10001", "US") in geocoder.calls


# ─── Failures ────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_missing_api_key():
    adapter = _adapter(_matrix_response([], []), api_key="")
    result = await adapter.matrix("M5V2T6", ["H2X1Y4"], Jurisdiction.CA)

    assert not result.ok
    assert "ORS API key" in result.error


@pytest.mark.asyncio
async def test_too_many_destinations():
    adapter = _adapter(_matrix_response([], []), max_destinations=2)
    result = await adapter.matrix("M5V2T6", ["H2X1Y4", "K1A0B1", "T2P1J9"], Jurisdiction.CA)

    assert not result.ok
    assert result.error.startswith("Too many destinations")


@pytest.mark.asyncio
async def test_invalid_origin_postal():
    adapter = _adapter(_matrix_response([], []))
    result = await adapter.matrix("nope", ["H2X1Y4"], Jurisdiction.CA)
    assert not result.ok


@pytest.mark.asyncio
async def test_origin_not_geocoded():
    adapter = _adapter(_matrix_response([], []))
    result = await adapter.matrix("V6B1A1", ["H2X1Y4"], Jurisdiction.CA)

    assert result.error == "Could not geocode origin postal V6B1A1"
    assert result.distances_km == []


@pytest.mark.asyncio
async def test_no_destination_geocoded():
    adapter = _adapter(_matrix_response([], []))
    result = await adapter.matrix("M5V2T6", ["V6B1A1", "bogus"], Jurisdiction.CA)
    assert result.error == "Could not geocode any destination postal"


@pytest.mark.asyncio
async def test_http_502():
    adapter = _adapter(lambda r: httpx.Response(502, text="Bad Gateway"))
    result = await adapter.matrix("M5V2T6", ["H2X1Y4"], Jurisdiction.CA)

    assert not result.ok
    assert result.error == "ORS matrix failed: HTTP 502"


@pytest.mark.asyncio
async def test_transport_error():
    def boom(request):
        raise httpx.ConnectError("unreachable", request=request)

    adapter = _adapter(boom)
    result = await adapter.matrix("M5V2T6", ["H2X1Y4"], Jurisdiction.CA)

    assert not result.ok
    assert "transport error" in result.error


@pytest.mark.asyncio
async def test_malformed_body():
    adapter = _adapter(lambda r: httpx.Response(200, json={"unexpected": True}))
    result = await adapter.matrix("M5V2T6", ["H2X1Y4"], Jurisdiction.CA)
    assert result.error == "ORS matrix returned a malformed response"


@pytest.mark.asyncio
async def test_non_json_body():
    adapter = _adapter(lambda r: httpx.Response(200, text="<html>oops</html>"))
    result = await adapter.matrix("M5V2T6", ["H2X1Y4"], Jurisdiction.CA)
    assert result.error == "ORS matrix returned a malformed response"
