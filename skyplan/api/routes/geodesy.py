"""Great-circle distance and bearing/distance offset endpoints."""

from __future__ import annotations

import math

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field, field_validator

from skyplan.contracts.common import GeoPoint
from skyplan.services.geodesy import distance_nm, offset_point

router = APIRouter(prefix="/geodesy", tags=["geodesy"])


class DistanceRequest(BaseModel):
    origin: GeoPoint
    destination: GeoPoint


class OffsetRequest(BaseModel):
    origin: GeoPoint
    bearing_deg: float = Field(..., description="Initial bearing, degrees (not normalized)")
    distance_nm: float = Field(..., ge=0)

    @field_validator("bearing_deg")
    @classmethod
    def finite_bearing(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("bearing must be finite")
        return v


@router.post("/distance")
async def distance(body: DistanceRequest) -> dict:
    return {"distance_nm": distance_nm(body.origin, body.destination)}


@router.post("/offset")
async def offset(body: OffsetRequest) -> dict:
    point = offset_point(body.origin, body.bearing_deg, body.distance_nm)
    if point is None:
        raise HTTPException(status_code=422, detail="Offset unavailable")
    return point.model_dump()
