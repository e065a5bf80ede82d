"""Pytest configuration and shared fixtures."""

import pytest

from nightbase.domain.entities.assignment import CastAssignment


@pytest.fixture
def floor_assignments() -> list[CastAssignment[str]]:
    """Two guests at one table: one served by a cast, one only waiting."""
    return [
        CastAssignment(id="1", cast_id="g1", guest_id="g1", status="serving", profile="Guest A"),
        CastAssignment(id="2", cast_id="s1", guest_id="g1", status="serving", profile="Staff X"),
        CastAssignment(id="3", cast_id="g2", guest_id="g2", status="serving", profile="Guest B"),
        CastAssignment(id="4", cast_id="s2", guest_id="g2", status="waiting", profile="Staff Y"),
    ]
