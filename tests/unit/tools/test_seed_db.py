"""Tests for the seed tool's verification summary (no database needed)."""

from app.domain.entities.technician import Technician
from app.tools.seed_db import precision_summary


def test_precision_summary_counts_tiers(sample_roster):
    roster = sample_roster + [Technician(id="4", name="Nowhere", postal="garbage")]
    tiers = precision_summary(roster, "CA")

    # Laval and Calgary lend their city points to their own postal codes
    assert tiers["exact"] == 2
    assert tiers["region"] == 1
    assert tiers["unresolved"] == 1


def test_precision_summary_uses_postal_mapping():
    roster = [Technician(id="1", name="A", postal="D1A1A1")]
    assert precision_summary(roster, "CA")["unresolved"] == 1
    assert precision_summary(roster, "CA", {"D1A1A1": "NS"})["region"] == 1
