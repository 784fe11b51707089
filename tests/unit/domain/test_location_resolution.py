"""Tests for GeolocationResolver tiers and roster overrides."""

from app.domain.entities.technician import Technician
from app.domain.policies.location_resolution import (
    GeolocationResolver,
    build_postal_overrides,
)
from app.domain.policies.postal_format import CanadianPostalFormat, UsZipFormat
from app.domain.reference.canada import CITY_COORDINATES, REGION_CENTROIDS
from app.domain.reference.tables import CANADA_TABLES, USA_TABLES, ReferenceTables
from app.domain.value_objects.enums import Jurisdiction, Precision
from app.domain.value_objects.geo_point import GeoPoint

CA = CanadianPostalFormat()
LAVAL = CITY_COORDINATES[("LAVAL", "QC")]


def _resolver(roster=(), postal_regions=None) -> GeolocationResolver:
    return GeolocationResolver.for_roster(CA, CANADA_TABLES, roster, postal_regions=postal_regions)


# ─── Overrides ──────────────────────────────────────────────────────


def test_overrides_built_from_known_cities_only():
    roster = [
        Technician(id="t1", name="A", city="Laval", region="QC", postal="H7N 1A1"),
        Technician(id="t2", name="B", city="Nowhere", region="ON", postal="K2P 1L4"),
        Technician(id="t3", name="C", city="Laval", region="QC", postal="bad"),
    ]
    overrides = build_postal_overrides(roster, CA, CANADA_TABLES)
    assert overrides == {"H7N1A1": LAVAL}


def test_override_resolves_exact_for_any_request_with_that_postal():
    roster = [Technician(id="t1", name="A", city="Laval", region="QC", postal="H7N1A1")]
    resolver = _resolver(roster)

    location = resolver.resolve("h7n 1a1")
    assert location.precision == Precision.EXACT
    assert location.point == LAVAL
    assert location.region == "QC"


# ─── City / region tiers ────────────────────────────────────────────


def test_city_hint_resolves_city_precision():
    location = _resolver().resolve("T2P1J9", city_hint="calgary", region_hint="ab")
    assert location.precision == Precision.CITY
    assert location.point == CITY_COORDINATES[("CALGARY", "AB")]
    assert location.city == "CALGARY"


def test_unknown_city_falls_back_to_region_centroid():
    location = _resolver().resolve("K2P1L4", city_hint="Smallville", region_hint="ON")
    assert location.precision == Precision.REGION
    assert location.point == REGION_CENTROIDS["ON"]
    assert location.city == ""


def test_region_derived_from_postal_prefix_without_hints():
    location = _resolver().resolve("V6B 1A1")
    assert location.precision == Precision.REGION
    assert location.region == "BC"


def test_region_hint_wins_over_prefix():
    # Prefix says ON, the roster row says QC
    assert _resolver().region_for("K1A0B1", "qc") == "QC"


def test_postal_region_mapping_overrides_prefix():
    resolver = _resolver(postal_regions={"k1a 0b1": "qc", "garbage": "ON"})
    assert resolver.region_for("K1A0B1") == "QC"
    assert resolver.region_for("K2P1L4") == "ON"
    assert resolver.resolve("K1A0B1").point == REGION_CENTROIDS["QC"]


# ─── Unresolved ─────────────────────────────────────────────────────


def test_invalid_postal_is_unresolved():
    location = _resolver().resolve("garbage", city_hint="Laval", region_hint="QC")
    assert location.precision == Precision.UNRESOLVED
    assert location.point is None


def test_unknown_region_is_unresolved():
    tables = ReferenceTables(
        jurisdiction=Jurisdiction.CA,
        region_centroids={"ON": GeoPoint(43.65, -79.38)},
    )
    resolver = GeolocationResolver(CA, tables)
    location = resolver.resolve("H2X1Y4")
    assert not location.is_resolved
    assert location.region == "QC"


def test_resolve_is_deterministic():
    resolver = _resolver()
    assert resolver.resolve("M5V 2T6") == resolver.resolve("m5v2t6")


# ─── USA ────────────────────────────────────────────────────────────


def test_us_city_and_state_resolution():
    resolver = GeolocationResolver(UsZipFormat(), USA_TABLES)
    city = resolver.resolve("60601", city_hint="Chicago", region_hint="IL")
    assert city.precision == Precision.CITY

    state = resolver.resolve("10001")
    assert state.precision == Precision.REGION
    assert state.region == "NY"
