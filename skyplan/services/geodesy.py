"""Great-circle geometry on a spherical Earth.

All distances are in nautical miles.  A single radius is used for both
the distance and the offset computation so that offsetting a point by
``d`` NM and measuring it back gives ``d``.
"""

from __future__ import annotations

import logging
import math

from pydantic import ValidationError

from skyplan.contracts.common import GeoPoint

logger = logging.getLogger(__name__)

EARTH_RADIUS_NM = 3440.069


def distance_nm(p1: GeoPoint, p2: GeoPoint) -> float:
    """Haversine distance in nautical miles."""
    la1, la2 = math.radians(p1.latitude), math.radians(p2.latitude)
    dlat = math.radians(p2.latitude - p1.latitude)
    dlon = math.radians(p2.longitude - p1.longitude)
    a = math.sin(dlat / 2) ** 2 + math.cos(la1) * math.cos(la2) * math.sin(dlon / 2) ** 2
    a = min(a, 1.0)
    return EARTH_RADIUS_NM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def offset_point(
    origin: GeoPoint, bearing_deg: float, distance_nm: float
) -> GeoPoint | None:
    """Point reached from ``origin`` along an initial bearing for a distance.

    The bearing is used as given (no normalization).  The resulting
    longitude is brought back into [-180, 180].

    Returns None when the computation faults (non-finite input); callers
    must then keep the waypoint unchanged.
    """
    try:
        theta = math.radians(bearing_deg)
        delta = distance_nm / EARTH_RADIUS_NM
        lat1 = math.radians(origin.latitude)
        lon1 = math.radians(origin.longitude)

        lat2 = math.asin(
            math.sin(lat1) * math.cos(delta)
            + math.cos(lat1) * math.sin(delta) * math.cos(theta)
        )
        lon2 = lon1 + math.atan2(
            math.sin(theta) * math.sin(delta) * math.cos(lat1),
            math.cos(delta) - math.sin(lat1) * math.sin(lat2),
        )

        longitude = (math.degrees(lon2) + 540) % 360 - 180
        return GeoPoint(latitude=math.degrees(lat2), longitude=longitude)
    except (ValueError, OverflowError, ValidationError) as exc:
        logger.warning(
            "Offset from (%s, %s) brg %s dist %s failed: %s",
            origin.latitude, origin.longitude, bearing_deg, distance_nm, exc,
        )
        return None


def format_bearing(value: float | str) -> str:
    """Whole degrees, zero-padded to three digits: ``45.4`` -> ``"045"``."""
    return f"{math.floor(float(value) + 0.5):03d}"


def format_distance(value: float | str) -> str:
    """Whole nautical miles: ``12.6`` -> ``"13"``."""
    return str(math.floor(float(value) + 0.5))
