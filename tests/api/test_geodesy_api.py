"""Tests for distance, offset and performance endpoints."""

from __future__ import annotations

import pytest

HANEDA = {"latitude": 35.5494, "longitude": 139.7798}
ITAMI = {"latitude": 34.7855, "longitude": 135.4382}


class TestDistanceAPI:
    async def test_distance(self, client):
        resp = await client.post("/api/geodesy/distance", json={"origin": HANEDA, "destination": ITAMI})
        assert resp.status_code == 200
        assert resp.json()["distance_nm"] == pytest.approx(218.0, abs=1.0)

    async def test_invalid_point(self, client):
        resp = await client.post(
            "/api/geodesy/distance",
            json={"origin": {"latitude": 100, "longitude": 0}, "destination": ITAMI},
        )
        assert resp.status_code == 422


class TestOffsetAPI:
    async def test_offset(self, client):
        resp = await client.post(
            "/api/geodesy/offset",
            json={"origin": {"latitude": 0, "longitude": 0}, "bearing_deg": 90, "distance_nm": 60},
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["latitude"] == pytest.approx(0, abs=1e-9)
        assert data["longitude"] == pytest.approx(0.99933, abs=1e-4)

    async def test_unnormalized_bearing_accepted(self, client):
        resp = await client.post(
            "/api/geodesy/offset",
            json={"origin": HANEDA, "bearing_deg": -90, "distance_nm": 10},
        )
        assert resp.status_code == 200
        assert resp.json()["longitude"] < HANEDA["longitude"]

    async def test_negative_distance_rejected(self, client):
        resp = await client.post(
            "/api/geodesy/offset",
            json={"origin": HANEDA, "bearing_deg": 90, "distance_nm": -1},
        )
        assert resp.status_code == 422


class TestPerformanceAPI:
    async def test_fl300(self, client):
        resp = await client.get("/api/performance", params={"speed": 250, "altitude": 30000})
        assert resp.status_code == 200
        data = resp.json()
        assert data["tas"] == pytest.approx(280.6, abs=0.1)
        assert data["mach"] == pytest.approx(0.476, abs=0.001)
        assert data["temperature_k"] == pytest.approx(228.714, abs=0.001)

    async def test_speed_required(self, client):
        resp = await client.get("/api/performance")
        assert resp.status_code == 422

    async def test_altitude_above_isa_ceiling(self, client):
        resp = await client.get("/api/performance", params={"speed": 250, "altitude": 150000})
        assert resp.status_code == 422
