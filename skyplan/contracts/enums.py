"""Enumerations shared across all SkyPlan contracts."""

from enum import Enum


class WaypointType(str, Enum):
    """Origin of a waypoint within a flight plan."""
    AIRPORT = "airport"
    NAVAID = "navaid"
    CUSTOM = "custom"


class AirportType(str, Enum):
    CIVILIAN = "civilian"
    MILITARY = "military"
    JOINT = "joint"


class NavaidType(str, Enum):
    VOR = "VOR"
    TACAN = "TACAN"
    VORTAC = "VORTAC"


class DMSFormat(str, Enum):
    """Textual DMS encodings accepted by the coordinate codec."""
    PUNCTUATED = "punctuated"  # N35°43'36"
    COMPACT = "compact"  # N354336
