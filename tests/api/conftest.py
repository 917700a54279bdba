"""Shared fixtures for API tests."""

from __future__ import annotations

import httpx
import pytest

from skyplan.adapters.reference_store import ReferenceStore
from skyplan.api.app import app


@pytest.fixture
def reference_store(airports_path, navaids_path):
    """Reference store loaded from the test GeoJSON fixtures."""
    store = ReferenceStore()
    store.load(airports_path, navaids_path)
    return store


@pytest.fixture
def test_app(reference_store):
    """FastAPI app with the fixture reference data on app.state."""
    app.state.reference_store = reference_store
    yield app


@pytest.fixture
async def client(test_app):
    """httpx AsyncClient wired to the test app."""
    transport = httpx.ASGITransport(app=test_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
