"""FastAPI application factory."""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI

# Load .env file from project root (must be before other imports)
load_dotenv()
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402

from skyplan.adapters.reference_store import ReferenceStore  # noqa: E402
from skyplan.api.routes import (  # noqa: E402
    coordinates,
    flight_plans,
    geodesy,
    performance,
    reference,
    waypoints,
)
from skyplan.services.errors import ReferenceDataError  # noqa: E402

logger = logging.getLogger(__name__)


def _env_path(name: str) -> Path | None:
    value = os.environ.get(name)
    return Path(value) if value else None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load airport and NAVAID reference data on startup."""
    store = ReferenceStore()
    try:
        store.load(
            _env_path("SKYPLAN_AIRPORTS_PATH"),
            _env_path("SKYPLAN_NAVAIDS_PATH"),
        )
    except ReferenceDataError as exc:
        logger.warning("Reference data not loaded: %s", exc)

    app.state.reference_store = store
    yield


app = FastAPI(
    title="SkyPlan API",
    description="Flight planning: coordinates, great-circle routes, TAS/Mach, ETE/ETA",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=os.environ.get("CORS_ORIGINS", "http://localhost:5173").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(coordinates.router, prefix="/api")
app.include_router(geodesy.router, prefix="/api")
app.include_router(performance.router, prefix="/api")
app.include_router(flight_plans.router, prefix="/api")
app.include_router(waypoints.router, prefix="/api")
app.include_router(reference.router, prefix="/api")


@app.get("/api/health")
async def health():
    store: ReferenceStore = app.state.reference_store
    return {
        "status": "ok",
        "reference_ready": store.is_ready,
        "airport_count": len(store.airports),
        "navaid_count": len(store.navaids),
    }
