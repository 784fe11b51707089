"""Pytest configuration and shared fixtures."""

import pytest

from app.domain.entities.technician import Technician


@pytest.fixture
def sample_ticket_text():
    return "Customer down since 9am. Please send someone to H7N 1A1 asap, dock door 3."


@pytest.fixture
def sample_ticket_text_us():
    return "Unit offline at 233 S Wacker Dr, Chicago IL 60606-6306. Priority."


@pytest.fixture
def sample_roster():
    return [
        Technician(id="1", name="Alex Martin", city="Laval", region="QC", postal="H7N1A1"),
        Technician(id="2", name="Jordan Park", region="ON", postal="M4C1A1"),
        Technician(id="3", name="Robin Roy", city="Calgary", region="AB", postal="T2P1J9"),
    ]
