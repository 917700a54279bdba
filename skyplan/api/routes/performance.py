"""ISA true airspeed and Mach endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Query

from skyplan.services.atmosphere import (
    ISA_CEILING_FT,
    calculate_mach,
    calculate_tas,
    temperature_at,
)

router = APIRouter(prefix="/performance", tags=["performance"])


@router.get("")
async def performance(
    speed: float = Query(..., ge=0, description="Indicated airspeed in kt"),
    altitude: float = Query(0, lt=ISA_CEILING_FT, description="Altitude in ft"),
) -> dict:
    tas = calculate_tas(speed, altitude)
    return {
        "temperature_k": temperature_at(altitude),
        "tas": tas,
        "mach": calculate_mach(tas, altitude),
    }
