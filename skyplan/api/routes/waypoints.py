"""Waypoint construction endpoints: NAVAID, offset and custom waypoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field, ValidationError, model_validator

from skyplan.adapters.reference_store import ReferenceStore
from skyplan.api.deps import get_reference_store
from skyplan.contracts.enums import DMSFormat
from skyplan.contracts.waypoint import Waypoint
from skyplan.services.coordinates import compact_dms_to_decimal, parse_punctuated_dms
from skyplan.services.errors import DMSFormatError
from skyplan.services.route_planner import (
    custom_waypoint,
    reoffset_waypoint,
    reposition_waypoint,
    waypoint_from_airport,
    waypoint_from_navaid,
)

router = APIRouter(prefix="/waypoints", tags=["waypoints"])


class NavaidWaypointRequest(BaseModel):
    navaid_id: str = Field(..., min_length=1)
    bearing: float | None = None
    distance: float | None = Field(default=None, ge=0)


class CustomWaypointRequest(BaseModel):
    """Raw coordinates, either decimal or DMS text, plus an optional offset."""

    latitude: float | None = None
    longitude: float | None = None
    lat_dms: str | None = None
    lon_dms: str | None = None
    dms_format: DMSFormat = DMSFormat.COMPACT
    index: int = Field(default=1, ge=1, description="1-based route position, names the waypoint")
    bearing: float | None = None
    distance: float | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def require_position(self) -> "CustomWaypointRequest":
        has_decimal = self.latitude is not None and self.longitude is not None
        has_dms = bool(self.lat_dms) and bool(self.lon_dms)
        if not (has_decimal or has_dms):
            raise ValueError("Provide latitude/longitude or lat_dms/lon_dms")
        return self


class ReoffsetRequest(BaseModel):
    waypoint: Waypoint
    bearing: float
    distance: float = Field(..., ge=0)


class RepositionRequest(BaseModel):
    waypoint: Waypoint
    lat_dms: str
    lon_dms: str


def _resolve_dms(body: CustomWaypointRequest) -> tuple[float, float]:
    if body.dms_format == DMSFormat.COMPACT:
        try:
            return (
                compact_dms_to_decimal(body.lat_dms, is_latitude=True),
                compact_dms_to_decimal(body.lon_dms, is_latitude=False),
            )
        except DMSFormatError as exc:
            raise HTTPException(status_code=422, detail=exc.reason) from exc

    latitude = parse_punctuated_dms(body.lat_dms, is_latitude=True)
    longitude = parse_punctuated_dms(body.lon_dms, is_latitude=False)
    if latitude is None or longitude is None:
        raise HTTPException(status_code=422, detail="Invalid DMS coordinates")
    return latitude, longitude


@router.post("/navaid", status_code=201)
async def create_navaid_waypoint(
    body: NavaidWaypointRequest,
    store: ReferenceStore = Depends(get_reference_store),
) -> dict:
    navaid = store.get_navaid(body.navaid_id)
    if navaid is None:
        raise HTTPException(status_code=404, detail="NAVAID not found")
    return waypoint_from_navaid(navaid, body.bearing, body.distance).to_dict()


@router.post("/airport/{airport_id}", status_code=201)
async def create_airport_waypoint(
    airport_id: str,
    store: ReferenceStore = Depends(get_reference_store),
) -> dict:
    airport = store.get_airport(airport_id)
    if airport is None:
        raise HTTPException(status_code=404, detail="Airport not found")
    return waypoint_from_airport(airport).to_dict()


@router.post("/custom", status_code=201)
async def create_custom_waypoint(body: CustomWaypointRequest) -> dict:
    if body.latitude is not None and body.longitude is not None:
        latitude, longitude = body.latitude, body.longitude
    else:
        latitude, longitude = _resolve_dms(body)

    try:
        waypoint = custom_waypoint(
            latitude, longitude, body.index, body.bearing, body.distance
        )
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail="Coordinates out of range") from exc
    return waypoint.to_dict()


@router.post("/reoffset")
async def reoffset(body: ReoffsetRequest) -> dict:
    if body.waypoint.offset is None:
        raise HTTPException(status_code=400, detail="Waypoint has no offset base")
    return reoffset_waypoint(body.waypoint, body.bearing, body.distance).to_dict()


@router.post("/reposition")
async def reposition(body: RepositionRequest) -> dict:
    """Move a waypoint to punctuated DMS coordinates; unparseable text leaves it in place."""
    return reposition_waypoint(body.waypoint, body.lat_dms, body.lon_dms).to_dict()
