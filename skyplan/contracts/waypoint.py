"""Waypoint and OffsetMetadata — points the aircraft flies over between
departure and arrival.

A waypoint is created from a NAVAID (optionally offset by a bearing and
distance), from an airport, or from raw coordinates.  Its position is
always stored as resolved decimal degrees.
"""

import hashlib

from pydantic import Field, field_validator, model_validator

from skyplan.contracts.common import GeoPoint, PlanModel
from skyplan.contracts.enums import WaypointType


def waypoint_id(name: str, latitude: float, longitude: float) -> str:
    """Deterministic waypoint ID: MD5(name:lat:lon)[:16]."""
    raw = f"{name}:{latitude}:{longitude}"
    return hashlib.md5(raw.encode()).hexdigest()[:16]


class OffsetMetadata(PlanModel):
    """Base NAVAID and bearing/distance used to derive an offset waypoint.

    Kept on the waypoint so the offset can be edited and recomputed from
    the base position it was derived from.
    """

    base_navaid_id: str = Field(..., min_length=1)
    base_latitude: float = Field(..., ge=-90.0, le=90.0)
    base_longitude: float = Field(..., ge=-180.0, le=180.0)
    bearing: float = Field(..., description="Initial bearing from the base, degrees")
    distance: float = Field(..., ge=0, description="Distance from the base, NM")

    @property
    def base_position(self) -> GeoPoint:
        return GeoPoint(latitude=self.base_latitude, longitude=self.base_longitude)


class Waypoint(PlanModel):
    """A point on the route, in flight order within ``FlightPlan.waypoints``."""

    id: str = Field(default="", max_length=64)
    name: str = Field(..., min_length=1, max_length=100)
    type: WaypointType = WaypointType.CUSTOM
    latitude: float = Field(..., ge=-90.0, le=90.0)
    longitude: float = Field(..., ge=-180.0, le=180.0)
    source_id: str | None = Field(
        default=None, description="Airport or NAVAID id the waypoint was built from"
    )
    channel: str | None = None
    name_editable: bool = False
    offset: OffsetMetadata | None = None

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return v.strip()

    @model_validator(mode="after")
    def default_id(self) -> "Waypoint":
        if not self.id:
            self.id = waypoint_id(self.name, self.latitude, self.longitude)
        return self

    @property
    def position(self) -> GeoPoint:
        return GeoPoint(latitude=self.latitude, longitude=self.longitude)
