"""Coordinate conversion endpoints (decimal <-> DMS)."""

from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel, Field

from skyplan.contracts.common import GeoPoint
from skyplan.contracts.coordinates import DMSComponents
from skyplan.contracts.enums import DMSFormat
from skyplan.contracts.result import ServiceResult
from skyplan.services.coordinates import (
    compact_dms_to_decimal,
    decimal_to_dms,
    format_compact_dms,
    parse_compact_dms,
    parse_punctuated_dms,
)
from skyplan.services.errors import DMSFormatError

router = APIRouter(prefix="/coordinates", tags=["coordinates"])


class DMSPair(BaseModel):
    latitude: str = Field(..., description="e.g. N35°43'36\" or N354336")
    longitude: str = Field(..., description="e.g. E139°46'47\" or E1394647")
    format: DMSFormat = DMSFormat.PUNCTUATED


class CompactField(BaseModel):
    text: str
    is_latitude: bool = True


@router.post("/to-dms")
async def to_dms(point: GeoPoint) -> dict:
    lat_dms, lon_dms = decimal_to_dms(point.latitude, point.longitude)
    return {
        "lat_dms": lat_dms,
        "lon_dms": lon_dms,
        "compact": format_compact_dms(point.latitude, point.longitude),
    }


@router.post("/from-dms")
async def from_dms(body: DMSPair) -> dict:
    """Decode a DMS pair; malformed text is reported in the result, not as an HTTP error."""
    if body.format == DMSFormat.COMPACT:
        axis = "latitude"
        try:
            latitude = compact_dms_to_decimal(body.latitude, is_latitude=True)
            axis = "longitude"
            longitude = compact_dms_to_decimal(body.longitude, is_latitude=False)
        except DMSFormatError as exc:
            return ServiceResult[GeoPoint].invalid_dms(exc, axis).model_dump(mode="json")
    else:
        latitude = parse_punctuated_dms(body.latitude, is_latitude=True)
        longitude = parse_punctuated_dms(body.longitude, is_latitude=False)
        if latitude is None or longitude is None:
            axis = "latitude" if latitude is None else "longitude"
            result = ServiceResult[GeoPoint].fail(
                "invalid_dms",
                "Expected H DD°MM'SS\" with minutes and seconds below 60",
                text=getattr(body, axis),
                axis=axis,
            )
            return result.model_dump(mode="json")

    point = GeoPoint(latitude=latitude, longitude=longitude)
    return ServiceResult[GeoPoint].ok(point).model_dump(mode="json")


@router.post("/parse-compact")
async def parse_compact(body: CompactField) -> dict:
    components = parse_compact_dms(body.text, body.is_latitude)
    if components is None:
        result = ServiceResult[DMSComponents].fail(
            "invalid_dms",
            "Not a valid compact DMS value",
            text=body.text,
            axis="latitude" if body.is_latitude else "longitude",
        )
    else:
        result = ServiceResult[DMSComponents].ok(components)
    return result.model_dump(mode="json")
