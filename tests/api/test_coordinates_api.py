"""Tests for coordinate conversion endpoints."""

from __future__ import annotations

import pytest


class TestToDMS:
    async def test_convert(self, client):
        resp = await client.post("/api/coordinates/to-dms", json={"latitude": 35.7267, "longitude": 139.7797})
        assert resp.status_code == 200
        assert resp.json() == {
            "lat_dms": "N35°43'36\"",
            "lon_dms": "E139°46'47\"",
            "compact": "N354336 E1394647",
        }

    async def test_out_of_range_rejected(self, client):
        resp = await client.post("/api/coordinates/to-dms", json={"latitude": 95, "longitude": 0})
        assert resp.status_code == 422


class TestFromDMS:
    async def test_punctuated(self, client):
        resp = await client.post(
            "/api/coordinates/from-dms",
            json={"latitude": "S33°52'08\"", "longitude": "W151°12'33\""},
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["success"] is True
        assert data["data"]["latitude"] == pytest.approx(-33.8688889, abs=1e-6)
        assert data["data"]["longitude"] == pytest.approx(-151.2091667, abs=1e-6)

    async def test_compact(self, client):
        resp = await client.post(
            "/api/coordinates/from-dms",
            json={"latitude": "N354336", "longitude": "1394647E", "format": "compact"},
        )
        data = resp.json()
        assert data["success"] is True
        assert data["data"]["latitude"] == pytest.approx(35.7266667, abs=1e-6)

    async def test_invalid_punctuated_is_result_not_error(self, client):
        resp = await client.post(
            "/api/coordinates/from-dms",
            json={"latitude": "N35°60'00\"", "longitude": "E139°46'47\""},
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["success"] is False
        assert data["error"]["code"] == "invalid_dms"
        assert data["error"]["text"] == "N35°60'00\""
        assert data["error"]["axis"] == "latitude"

    async def test_invalid_compact_reports_reason(self, client):
        resp = await client.post(
            "/api/coordinates/from-dms",
            json={"latitude": "N35433", "longitude": "E1394647", "format": "compact"},
        )
        data = resp.json()
        assert data["success"] is False
        assert "6 digits" in data["error"]["message"]

    async def test_invalid_compact_longitude_names_axis(self, client):
        resp = await client.post(
            "/api/coordinates/from-dms",
            json={"latitude": "N354336", "longitude": "E13946", "format": "compact"},
        )
        error = resp.json()["error"]
        assert error["axis"] == "longitude"
        assert error["text"] == "E13946"
        assert "7 digits" in error["message"]

    async def test_formats_not_interchangeable(self, client):
        resp = await client.post(
            "/api/coordinates/from-dms",
            json={"latitude": "N354336", "longitude": "E1394647", "format": "punctuated"},
        )
        assert resp.json()["success"] is False


class TestParseCompact:
    async def test_suffix_hemisphere(self, client):
        resp = await client.post(
            "/api/coordinates/parse-compact", json={"text": "1234005E", "is_latitude": False}
        )
        data = resp.json()
        assert data["success"] is True
        assert data["data"] == {"degrees": "123", "minutes": "40", "seconds": "05", "hemisphere": "E"}

    async def test_wrong_width(self, client):
        resp = await client.post("/api/coordinates/parse-compact", json={"text": "N3543"})
        assert resp.json()["success"] is False
