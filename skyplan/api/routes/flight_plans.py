"""Flight plan summary endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from skyplan.contracts.flight_plan import FlightPlan

router = APIRouter(prefix="/flight-plans", tags=["flight-plans"])


@router.post("/summary")
async def summarize(plan: FlightPlan) -> dict:
    """Return the plan with its derived TAS, Mach, distance, ETE, ETA and legs.

    Derived values sent by the client are ignored and recomputed.
    """
    summary = plan.summary()
    data = plan.to_dict()
    data["complete"] = summary.complete
    data["legs"] = [leg.to_dict() for leg in summary.legs]
    return data
