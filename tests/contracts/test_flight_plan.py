"""Tests for the FlightPlan contract and its computed fields."""

import pytest
from pydantic import ValidationError

from skyplan.contracts.flight_plan import FlightPlan
from skyplan.contracts.reference import Airport
from skyplan.contracts.waypoint import Waypoint
from skyplan.services import route_planner
from skyplan.services.atmosphere import ISA_CEILING_FT

HANEDA = Airport(id="RJTT", name="TOKYO/HANEDA", latitude=35.5494, longitude=139.7798)
ITAMI = Airport(id="RJOO", name="OSAKA/ITAMI", latitude=34.7855, longitude=135.4382)


def _plan(**kwargs) -> FlightPlan:
    return FlightPlan(
        departure=HANEDA, arrival=ITAMI, speed=250, altitude=30000,
        departure_time="09:00", **kwargs,
    )


class TestDefaults:
    def test_empty_plan(self):
        plan = FlightPlan()
        assert plan.waypoints == []
        assert plan.total_distance == 0
        assert plan.tas == 0
        assert plan.ete == "00:00"
        assert plan.eta == "--:--"


class TestDepartureTime:
    def test_normalized(self):
        assert FlightPlan(departure_time="9:05").departure_time == "09:05"

    def test_blank_is_none(self):
        assert FlightPlan(departure_time="  ").departure_time is None

    @pytest.mark.parametrize("value", ["25:00", "09:75", "nine"])
    def test_invalid_rejected(self, value):
        with pytest.raises(ValidationError):
            FlightPlan(departure_time=value)


class TestComputedFields:
    def test_derived_values(self):
        plan = _plan()
        assert plan.total_distance == pytest.approx(218.0, abs=1.0)
        assert plan.tas == pytest.approx(280.6, abs=0.1)
        assert plan.mach == pytest.approx(0.476, abs=0.001)
        assert plan.ete == "00:46"
        assert plan.eta == "09:46"

    def test_recomputed_on_change(self):
        plan = _plan()
        before = plan.total_distance
        plan.waypoints.append(Waypoint(name="NORTH", latitude=36.5, longitude=137.5))
        assert plan.total_distance > before

        plan.speed = 0
        assert plan.eta == "--:--"

    def test_not_settable(self):
        plan = _plan()
        with pytest.raises((AttributeError, ValueError)):
            plan.tas = 999  # type: ignore[misc]

    def test_serialized(self):
        data = _plan().to_dict()
        for key in ("tas", "mach", "total_distance", "ete", "eta"):
            assert key in data
        assert data["eta"] == "09:46"

    def test_incoming_derived_values_ignored(self):
        data = _plan().to_dict()
        data["tas"] = 999
        data["eta"] = "00:00"
        restored = FlightPlan.from_dict(data)
        assert restored.tas == pytest.approx(280.6, abs=0.1)
        assert restored.eta == "09:46"

    def test_summary_matches_fields(self):
        plan = _plan()
        summary = plan.summary()
        assert summary.eta == plan.eta
        assert summary.total_distance == plan.total_distance
        assert len(summary.legs) == 1


class TestAltitudeBound:
    def test_below_ceiling_accepted(self):
        assert FlightPlan(altitude=60000).altitude == 60000

    @pytest.mark.parametrize("altitude", [ISA_CEILING_FT, 150000, 200000])
    def test_at_or_above_ceiling_rejected(self, altitude):
        with pytest.raises(ValidationError):
            FlightPlan(altitude=altitude)


class TestSummaryCache:
    def test_serialization_computes_once(self, monkeypatch):
        calls = []
        compute = route_planner.compute_summary

        def counting(plan):
            calls.append(plan)
            return compute(plan)

        monkeypatch.setattr(route_planner, "compute_summary", counting)
        plan = _plan()
        plan.to_dict()
        plan.summary()
        assert len(calls) == 1

    def test_in_place_waypoint_edit_invalidates(self):
        plan = _plan(waypoints=[Waypoint(name="NORTH", latitude=36.5, longitude=137.5)])
        before = plan.total_distance
        plan.waypoints[0].latitude = 34.9
        assert plan.total_distance < before

    def test_copy_with_update_recomputes(self):
        plan = _plan()
        assert plan.eta == "09:46"
        assert plan.model_copy(update={"departure_time": "10:00"}).eta == "10:46"
