"""Tests for the health endpoint."""

from __future__ import annotations


class TestHealthAPI:
    async def test_health(self, client):
        resp = await client.get("/api/health")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "ok"
        assert data["reference_ready"] is True
        assert data["airport_count"] == 4
        assert data["navaid_count"] == 2
