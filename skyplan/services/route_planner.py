"""Route composition: ordered route points, leg distances and derived figures.

Also builds waypoints the way the planning UI adds them: from a NAVAID
(optionally offset by a bearing and distance), from an airport, or from
raw coordinates.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from skyplan.contracts.common import GeoPoint
from skyplan.contracts.enums import WaypointType
from skyplan.contracts.reference import Airport, Navaid
from skyplan.contracts.summary import FlightSummary, LegDistance
from skyplan.contracts.waypoint import OffsetMetadata, Waypoint
from skyplan.services.atmosphere import calculate_mach, calculate_tas
from skyplan.services.coordinates import parse_punctuated_dms
from skyplan.services.flight_time import calculate_eta, calculate_ete, format_time
from skyplan.services.geodesy import (
    distance_nm,
    format_bearing,
    format_distance,
    offset_point,
)

if TYPE_CHECKING:
    from skyplan.contracts.flight_plan import FlightPlan

logger = logging.getLogger(__name__)


def route_stops(plan: FlightPlan) -> list[Airport | Waypoint]:
    """``[departure, *waypoints, arrival]``, or empty unless both ends are set."""
    if plan.departure is None or plan.arrival is None:
        return []
    return [plan.departure, *plan.waypoints, plan.arrival]


def leg_distances(plan: FlightPlan) -> list[LegDistance]:
    stops = route_stops(plan)
    return [
        LegDistance(
            from_name=a.name,
            to_name=b.name,
            distance_nm=distance_nm(a.position, b.position),
        )
        for a, b in zip(stops, stops[1:])
    ]


def total_distance(plan: FlightPlan) -> float:
    return sum(leg.distance_nm for leg in leg_distances(plan))


def compute_summary(plan: FlightPlan) -> FlightSummary:
    """Derive TAS, Mach, distance, ETE and ETA from the plan's inputs.

    Pure: the same inputs always give the same summary.
    """
    tas = calculate_tas(plan.speed, plan.altitude)
    mach = calculate_mach(tas, plan.altitude)
    legs = leg_distances(plan)
    distance = sum(leg.distance_nm for leg in legs)
    ete_minutes = calculate_ete(distance, tas)

    return FlightSummary(
        complete=bool(legs),
        tas=tas,
        mach=mach,
        total_distance=distance,
        ete_minutes=ete_minutes,
        ete=format_time(ete_minutes),
        eta=calculate_eta(plan.departure_time, ete_minutes),
        legs=legs,
    )


# ------------------------------------------------------------------
# Waypoint builders
# ------------------------------------------------------------------


def _offset_label(bearing: float, distance: float) -> str:
    return f"{format_bearing(bearing)}/{format_distance(distance)}"


def waypoint_from_airport(airport: Airport) -> Waypoint:
    return Waypoint(
        id=airport.id,
        name=airport.name,
        type=WaypointType.AIRPORT,
        latitude=airport.latitude,
        longitude=airport.longitude,
        source_id=airport.id,
    )


def waypoint_from_navaid(
    navaid: Navaid,
    bearing: float | None = None,
    distance: float | None = None,
) -> Waypoint:
    """Waypoint over a NAVAID, or offset from it when bearing and distance are given.

    An offset waypoint is named ``"<NAVAID> (BRG/DIST)"`` and keeps the
    base position so the offset can be edited later.  If the offset cannot
    be computed the plain NAVAID waypoint is returned.
    """
    waypoint = Waypoint(
        id=navaid.id,
        name=navaid.name,
        type=WaypointType.NAVAID,
        latitude=navaid.latitude,
        longitude=navaid.longitude,
        source_id=navaid.id,
        channel=navaid.channel,
    )
    if bearing is None or distance is None:
        return waypoint

    target = offset_point(navaid.position, bearing, distance)
    if target is None:
        return waypoint

    label = _offset_label(bearing, distance)
    return Waypoint(
        id=f"{navaid.id}_{label}",
        name=f"{navaid.name} ({label})",
        type=WaypointType.CUSTOM,
        latitude=target.latitude,
        longitude=target.longitude,
        source_id=navaid.id,
        offset=OffsetMetadata(
            base_navaid_id=navaid.id,
            base_latitude=navaid.latitude,
            base_longitude=navaid.longitude,
            bearing=bearing,
            distance=distance,
        ),
    )


def custom_waypoint(
    latitude: float,
    longitude: float,
    index: int,
    bearing: float | None = None,
    distance: float | None = None,
) -> Waypoint:
    """User-entered waypoint, optionally offset from the entered position.

    ``index`` is the 1-based position the waypoint will take in the route
    and only feeds the default name.  Out-of-range coordinates raise a
    pydantic ``ValidationError``.
    """
    position = GeoPoint(latitude=latitude, longitude=longitude)
    if bearing is not None and distance is not None:
        position = offset_point(position, bearing, distance) or position

    return Waypoint(
        name=f"Custom Waypoint {index}",
        type=WaypointType.CUSTOM,
        latitude=position.latitude,
        longitude=position.longitude,
        name_editable=True,
    )


def reoffset_waypoint(waypoint: Waypoint, bearing: float, distance: float) -> Waypoint:
    """Recompute an offset waypoint from its stored base NAVAID position.

    Waypoints without offset metadata, or whose new offset cannot be
    computed, are returned unchanged.
    """
    if waypoint.offset is None:
        return waypoint

    base = waypoint.offset
    target = offset_point(base.base_position, bearing, distance)
    if target is None:
        return waypoint

    label = _offset_label(bearing, distance)
    base_name = waypoint.name.rsplit(" (", 1)[0]
    return waypoint.model_copy(
        update={
            "id": f"{base.base_navaid_id}_{label}",
            "name": f"{base_name} ({label})",
            "latitude": target.latitude,
            "longitude": target.longitude,
            "offset": base.model_copy(update={"bearing": bearing, "distance": distance}),
        }
    )


def reposition_waypoint(waypoint: Waypoint, lat_dms: str, lon_dms: str) -> Waypoint:
    """Move a waypoint to punctuated-DMS coordinates.

    Keeps the previous position when either string does not parse.  A moved
    offset waypoint is detached from its NAVAID base, so it can no longer be
    re-offset.
    """
    latitude = parse_punctuated_dms(lat_dms, is_latitude=True)
    longitude = parse_punctuated_dms(lon_dms, is_latitude=False)
    if latitude is None or longitude is None:
        logger.info("Keeping %s in place: unparseable DMS %r %r", waypoint.id, lat_dms, lon_dms)
        return waypoint
    return waypoint.model_copy(
        update={"latitude": latitude, "longitude": longitude, "offset": None}
    )
