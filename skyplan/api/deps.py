"""FastAPI dependency injection wiring."""

from __future__ import annotations

from fastapi import Request

from skyplan.adapters.reference_store import ReferenceStore


# ------------------------------------------------------------------
# Reference data (singleton from app.state)
# ------------------------------------------------------------------


def get_reference_store(request: Request) -> ReferenceStore:
    return request.app.state.reference_store
