"""Tests for ETE/ETA clock arithmetic."""

import pytest

from skyplan.services.errors import TimeFormatError
from skyplan.services.flight_time import (
    ETA_PLACEHOLDER,
    calculate_eta,
    calculate_ete,
    format_time,
    parse_time,
)


class TestFormatTime:
    @pytest.mark.parametrize(
        "minutes,expected",
        [(0, "00:00"), (5, "00:05"), (90, "01:30"), (59.99, "00:59"), (46.57, "00:46")],
    )
    def test_format(self, minutes, expected):
        assert format_time(minutes) == expected

    def test_no_wrap_past_midnight(self):
        assert format_time(1500) == "25:00"


class TestParseTime:
    def test_valid(self):
        assert parse_time("09:00") == 540
        assert parse_time("9:05") == 545
        assert parse_time("23:59") == 1439

    @pytest.mark.parametrize("text", ["24:00", "12:60", "noon", "", "12:5", "1200"])
    def test_invalid(self, text):
        with pytest.raises(TimeFormatError):
            parse_time(text)


class TestETE:
    def test_minutes(self):
        assert calculate_ete(120, 240) == pytest.approx(30)

    def test_zero_tas(self):
        assert calculate_ete(500, 0) == 0

    def test_unknown_tas(self):
        assert calculate_ete(500, None) == 0

    def test_zero_distance(self):
        assert calculate_ete(0, 250) == 0


class TestETA:
    def test_no_departure_time(self):
        assert calculate_eta(None, 30) == ETA_PLACEHOLDER == "--:--"
        assert calculate_eta("", 30) == "--:--"

    def test_no_ete(self):
        assert calculate_eta("10:00", 0) == "--:--"
        assert calculate_eta("10:00", -5) == "--:--"

    def test_adds_ete(self):
        assert calculate_eta("10:00", 90) == "11:30"

    def test_matches_format_time(self):
        assert calculate_eta("09:00", 46.57) == format_time(540 + 46.57) == "09:46"

    def test_no_rollover(self):
        assert calculate_eta("23:30", 90) == "25:00"

    def test_malformed_departure_time(self):
        assert calculate_eta("bad", 30) == "--:--"
