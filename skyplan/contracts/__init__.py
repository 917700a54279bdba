"""SkyPlan data contracts — Pydantic v2 models for flight planning.

Inputs
------
- ``Airport`` / ``Navaid`` — reference records loaded from GeoJSON
- ``Waypoint`` (+ ``OffsetMetadata``) — route points in flight order
- ``FlightPlan`` — departure, arrival, waypoints, IAS, altitude, departure time

Calculated (never stored)
-------------------------
- ``FlightPlan`` computed fields — TAS, Mach, total distance, ETE, ETA
- ``FlightSummary`` / ``LegDistance`` — the same figures plus per-leg distances
- ``DMSComponents`` — fields decoded from a compact DMS string
"""

from skyplan.contracts.enums import AirportType, DMSFormat, NavaidType, WaypointType
from skyplan.contracts.common import GeoPoint, PlanModel
from skyplan.contracts.result import ServiceError, ServiceResult
from skyplan.contracts.coordinates import DMSComponents
from skyplan.contracts.reference import Airport, Navaid
from skyplan.contracts.waypoint import OffsetMetadata, Waypoint, waypoint_id
from skyplan.contracts.summary import FlightSummary, LegDistance
from skyplan.contracts.flight_plan import FlightPlan

__all__ = [
    # Enums
    "AirportType",
    "DMSFormat",
    "NavaidType",
    "WaypointType",
    # Common
    "GeoPoint",
    "PlanModel",
    # Result
    "ServiceError",
    "ServiceResult",
    # Domain models
    "DMSComponents",
    "Airport",
    "Navaid",
    "OffsetMetadata",
    "Waypoint",
    "waypoint_id",
    "FlightSummary",
    "LegDistance",
    "FlightPlan",
]
