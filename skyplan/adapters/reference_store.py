"""In-memory airport/NAVAID store, loaded once and served read-only."""

from __future__ import annotations

import logging
from pathlib import Path

from skyplan.adapters.geojson_loader import group_by_type, load_airports, load_navaids
from skyplan.contracts.reference import Airport, Navaid

logger = logging.getLogger(__name__)


class ReferenceStore:
    """Holds the reference datasets the planner looks waypoints up in.

    - Loaded from GeoJSON files at startup (or filled directly in tests).
    - Never mutated after loading, so it is shared by all requests.
    """

    def __init__(
        self,
        airports: list[Airport] | None = None,
        navaids: list[Navaid] | None = None,
    ):
        self._airports: dict[str, Airport] = {}
        self._navaids: dict[str, Navaid] = {}
        self._index(airports or [], navaids or [])

    def _index(self, airports: list[Airport], navaids: list[Navaid]) -> None:
        self._airports = {a.id.upper(): a for a in airports}
        self._navaids = {n.id.upper(): n for n in navaids}

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self, airports_path: Path | None, navaids_path: Path | None) -> None:
        """Replace the datasets with the contents of GeoJSON files.

        A None path leaves the corresponding dataset empty.
        """
        airports = load_airports(airports_path) if airports_path else []
        navaids = load_navaids(navaids_path) if navaids_path else []
        self._index(airports, navaids)
        logger.info(
            "Reference store ready: %d airports, %d NAVAIDs",
            len(self._airports), len(self._navaids),
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def is_ready(self) -> bool:
        return bool(self._airports or self._navaids)

    @property
    def airports(self) -> list[Airport]:
        return list(self._airports.values())

    @property
    def navaids(self) -> list[Navaid]:
        return list(self._navaids.values())

    def get_airport(self, airport_id: str) -> Airport | None:
        return self._airports.get(airport_id.upper())

    def get_navaid(self, navaid_id: str) -> Navaid | None:
        return self._navaids.get(navaid_id.upper())

    def airports_by_type(self) -> dict[str, list[Airport]]:
        return group_by_type(self.airports)
