"""Airport and NAVAID lookup endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from skyplan.adapters.reference_store import ReferenceStore
from skyplan.api.deps import get_reference_store
from skyplan.contracts.enums import AirportType

router = APIRouter(prefix="/reference", tags=["reference"])


@router.get("/airports")
async def list_airports(
    type: AirportType | None = None,
    store: ReferenceStore = Depends(get_reference_store),
) -> list[dict]:
    airports = store.airports
    if type is not None:
        airports = [a for a in airports if a.type == type]
    return [a.to_dict() for a in airports]


@router.get("/airports/grouped")
async def grouped_airports(
    store: ReferenceStore = Depends(get_reference_store),
) -> list[dict]:
    """Airports grouped by type, in the shape a grouped select box expects."""
    return [
        {"label": kind, "options": [a.to_dict() for a in airports]}
        for kind, airports in store.airports_by_type().items()
    ]


@router.get("/airports/{airport_id}")
async def get_airport(
    airport_id: str,
    store: ReferenceStore = Depends(get_reference_store),
) -> dict:
    airport = store.get_airport(airport_id)
    if airport is None:
        raise HTTPException(status_code=404, detail="Airport not found")
    return airport.to_dict()


@router.get("/navaids")
async def list_navaids(
    store: ReferenceStore = Depends(get_reference_store),
) -> list[dict]:
    return [n.to_dict() for n in store.navaids]


@router.get("/navaids/{navaid_id}")
async def get_navaid(
    navaid_id: str,
    store: ReferenceStore = Depends(get_reference_store),
) -> dict:
    navaid = store.get_navaid(navaid_id)
    if navaid is None:
        raise HTTPException(status_code=404, detail="NAVAID not found")
    return navaid.to_dict()
