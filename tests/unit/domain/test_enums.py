"""Tests for domain enums."""

from app.domain.value_objects.enums import (
    Jurisdiction,
    Precision,
    ResolutionState,
    RoutingMode,
)


def test_jurisdiction_values():
    assert Jurisdiction.CA.value == "CA"
    assert Jurisdiction.US.value == "US"
    assert Jurisdiction("US") is Jurisdiction.US


def test_precision_values():
    assert [p.value for p in Precision] == ["exact", "city", "region", "unresolved"]


def test_routing_mode_values():
    assert RoutingMode.DRIVING.value == "driving"
    assert RoutingMode.ESTIMATE.value == "estimate"


def test_resolution_states_count():
    assert len(ResolutionState) == 9


def test_enums_compare_as_strings():
    assert Precision.EXACT == "exact"
    assert RoutingMode.DRIVING == "driving"
