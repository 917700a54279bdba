"""Shared fixtures: reference GeoJSON files under tests/fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def airports_path() -> Path:
    return FIXTURES / "Airports.geojson"


@pytest.fixture
def navaids_path() -> Path:
    return FIXTURES / "Navaids.geojson"
