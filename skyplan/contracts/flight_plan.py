"""FlightPlan — pilot inputs plus the figures derived from them.

Only the inputs are settable: departure, arrival, waypoints, speed,
altitude and departure time.  TAS, Mach, total distance, ETE and ETA are
computed fields derived from the inputs when they are read or serialized,
so they can never drift out of sync.  Values for them in incoming
payloads are ignored.

The derived summary is cached against a snapshot of the inputs: one
serialization computes the route once, and any later change to an input
(including in-place edits of waypoints) invalidates the cache.
"""

from typing import Any

from pydantic import Field, PrivateAttr, computed_field, field_validator

from skyplan.contracts.common import PlanModel
from skyplan.contracts.reference import Airport
from skyplan.contracts.summary import FlightSummary
from skyplan.contracts.waypoint import Waypoint
from skyplan.services import route_planner
from skyplan.services.atmosphere import ISA_CEILING_FT
from skyplan.services.flight_time import parse_time


def _stop_key(stop: Airport | Waypoint | None) -> tuple | None:
    if stop is None:
        return None
    return (stop.name, stop.latitude, stop.longitude)


class FlightPlan(PlanModel):
    """A single-day flight from ``departure`` to ``arrival``."""

    departure: Airport | None = None
    arrival: Airport | None = None
    waypoints: list[Waypoint] = Field(
        default_factory=list, description="In flight order"
    )
    speed: float = Field(default=0, ge=0, description="Indicated airspeed in kt")
    altitude: float = Field(
        default=0,
        lt=ISA_CEILING_FT,
        description="Cruise altitude in ft, below the ISA model ceiling",
    )
    departure_time: str | None = Field(
        default=None, description="Local 24-hour departure time, HH:MM"
    )

    _summary_cache: tuple[tuple, FlightSummary] | None = PrivateAttr(default=None)

    @field_validator("departure_time", mode="before")
    @classmethod
    def validate_departure_time(cls, v: str | None) -> str | None:
        if v is None or not str(v).strip():
            return None
        minutes = parse_time(str(v))
        return f"{minutes // 60:02d}:{minutes % 60:02d}"

    def _inputs_key(self) -> tuple[Any, ...]:
        return (
            _stop_key(self.departure),
            _stop_key(self.arrival),
            tuple(_stop_key(wp) for wp in self.waypoints),
            self.speed,
            self.altitude,
            self.departure_time,
        )

    def summary(self) -> FlightSummary:
        key = self._inputs_key()
        if self._summary_cache is None or self._summary_cache[0] != key:
            self._summary_cache = (key, route_planner.compute_summary(self))
        return self._summary_cache[1]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def tas(self) -> float:
        return self.summary().tas

    @computed_field  # type: ignore[prop-decorator]
    @property
    def mach(self) -> float:
        return self.summary().mach

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_distance(self) -> float:
        return self.summary().total_distance

    @computed_field  # type: ignore[prop-decorator]
    @property
    def ete(self) -> str:
        return self.summary().ete

    @computed_field  # type: ignore[prop-decorator]
    @property
    def eta(self) -> str:
        return self.summary().eta

    @computed_field  # type: ignore[prop-decorator]
    @property
    def ete_minutes(self) -> float:
        return self.summary().ete_minutes
