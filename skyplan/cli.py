"""Command-line flight plan summary.

Usage:
    python -m skyplan.cli --airports Airports.geojson --navaids Navaids.geojson \\
        --departure RJTT --arrival RJOO --navaid HME/250/20 --point N344500,E1370000 \\
        --speed 250 --altitude 30000 --time 09:00
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from skyplan.adapters.reference_store import ReferenceStore
from skyplan.contracts.flight_plan import FlightPlan
from skyplan.contracts.waypoint import Waypoint
from skyplan.services.coordinates import compact_dms_to_decimal
from skyplan.services.errors import SkyPlanError
from skyplan.services.route_planner import custom_waypoint, waypoint_from_navaid

logger = logging.getLogger(__name__)


def _navaid_stop(text: str) -> tuple[str, str]:
    return ("navaid", text)


def _point_stop(text: str) -> tuple[str, str]:
    return ("point", text)


def _build_waypoint(
    kind: str, text: str, index: int, store: ReferenceStore
) -> Waypoint:
    """Resolve ``ID[/BRG/DIST]`` or ``LAT,LON`` (compact DMS) into a waypoint."""
    if kind == "point":
        lat_text, _, lon_text = text.partition(",")
        latitude = compact_dms_to_decimal(lat_text, is_latitude=True)
        longitude = compact_dms_to_decimal(lon_text, is_latitude=False)
        return custom_waypoint(latitude, longitude, index)

    navaid_id, *offset = text.split("/")
    navaid = store.get_navaid(navaid_id)
    if navaid is None:
        raise SkyPlanError(f"Unknown NAVAID {navaid_id!r}")
    if len(offset) == 2:
        return waypoint_from_navaid(navaid, float(offset[0]), float(offset[1]))
    return waypoint_from_navaid(navaid)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="SkyPlan flight plan summary")
    parser.add_argument("--airports", type=Path, help="Airports GeoJSON file")
    parser.add_argument("--navaids", type=Path, help="NAVAIDs GeoJSON file")
    parser.add_argument("--departure", required=True, help="Departure airport id")
    parser.add_argument("--arrival", required=True, help="Arrival airport id")
    parser.add_argument(
        "--navaid", dest="stops", action="append", type=_navaid_stop, default=[],
        help="NAVAID waypoint, ID or ID/BEARING/DISTANCE (repeatable)",
    )
    parser.add_argument(
        "--point", dest="stops", action="append", type=_point_stop,
        help="Custom waypoint in compact DMS, LAT,LON (repeatable)",
    )
    parser.add_argument("--speed", type=float, default=0, help="IAS in kt")
    parser.add_argument("--altitude", type=float, default=0, help="Altitude in ft")
    parser.add_argument("--time", default=None, help="Departure time HH:MM")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    store = ReferenceStore()
    try:
        store.load(args.airports, args.navaids)
        departure = store.get_airport(args.departure)
        arrival = store.get_airport(args.arrival)
        if departure is None or arrival is None:
            raise SkyPlanError("Departure and arrival must be known airports")

        waypoints = [
            _build_waypoint(kind, text, i, store)
            for i, (kind, text) in enumerate(args.stops, start=1)
        ]
        plan = FlightPlan(
            departure=departure,
            arrival=arrival,
            waypoints=waypoints,
            speed=args.speed,
            altitude=args.altitude,
            departure_time=args.time,
        )
        summary = plan.summary()
    except (SkyPlanError, ValidationError, ValueError) as exc:
        logger.error("%s", exc)
        return 1

    output = plan.to_dict()
    output["legs"] = [leg.to_dict() for leg in summary.legs]
    json.dump(output, sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
