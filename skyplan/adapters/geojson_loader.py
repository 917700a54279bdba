"""GeoJSON loader for airport and NAVAID reference datasets.

Reads the ``Airports.geojson`` / ``Navaids.geojson`` files served to the
planning UI and builds ``Airport`` / ``Navaid`` contract objects.

Expected feature layout (coordinates are ``[lon, lat]``)::

    {"type": "Feature",
     "properties": {"id": "RJTT", "name1": "TOKYO/HANEDA", "type": "civilian"},
     "geometry": {"type": "Point", "coordinates": [139.7798, 35.5494]}}

NAVAID properties are ``id``, ``name``, ``type`` and optionally ``ch``
(TACAN channel) and ``frequency``.
"""

from __future__ import annotations

import json
import logging
from collections import defaultdict
from pathlib import Path
from typing import Any, TypeVar

from pydantic import ValidationError

from skyplan.contracts.reference import Airport, Navaid
from skyplan.services.errors import ReferenceDataError

logger = logging.getLogger(__name__)

T = TypeVar("T", Airport, Navaid)


def _read_features(path: Path) -> list[dict[str, Any]]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ReferenceDataError(f"Reference file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise ReferenceDataError(f"Invalid GeoJSON in {path}: {exc}") from exc

    if not isinstance(data, dict) or data.get("type") != "FeatureCollection":
        raise ReferenceDataError(f"{path} is not a GeoJSON FeatureCollection")
    features = data.get("features") or []
    if not isinstance(features, list):
        raise ReferenceDataError(f"{path}: \"features\" is not a list")
    return features


def _point(feature: dict[str, Any]) -> tuple[float, float] | None:
    """(lat, lon) of a Point feature, or None."""
    geometry = feature.get("geometry")
    if not isinstance(geometry, dict) or geometry.get("type") != "Point":
        return None
    coords = geometry.get("coordinates")
    try:
        return float(coords[1]), float(coords[0])
    except (TypeError, ValueError, IndexError, KeyError):
        logger.warning("Skipping feature with unusable coordinates: %r", coords)
        return None


def _properties(feature: Any) -> dict[str, Any] | None:
    """Feature properties, or None when ``feature`` is not a GeoJSON object."""
    if not isinstance(feature, dict):
        logger.warning("Skipping non-object feature: %r", feature)
        return None
    props = feature.get("properties")
    return props if isinstance(props, dict) else {}


def parse_airport(feature: dict[str, Any]) -> Airport | None:
    """Build an Airport from one feature; None when the feature is unusable."""
    props = _properties(feature)
    if props is None:
        return None
    point = _point(feature)
    if point is None:
        return None
    lat, lon = point
    try:
        return Airport(
            id=props.get("id", ""),
            name=props.get("name1") or props.get("name") or "",
            type=props.get("type") or "civilian",
            latitude=lat,
            longitude=lon,
        )
    except ValidationError as exc:
        logger.warning("Skipping airport feature %s: %s", props.get("id"), exc)
        return None


def parse_navaid(feature: dict[str, Any]) -> Navaid | None:
    """Build a Navaid from one feature; None when the feature is unusable."""
    props = _properties(feature)
    if props is None:
        return None
    point = _point(feature)
    if point is None:
        return None
    lat, lon = point
    try:
        return Navaid(
            id=props.get("id", ""),
            name=props.get("name") or "",
            type=props.get("type") or "VOR",
            latitude=lat,
            longitude=lon,
            channel=props.get("ch"),
            frequency=props.get("frequency"),
        )
    except ValidationError as exc:
        logger.warning("Skipping NAVAID feature %s: %s", props.get("id"), exc)
        return None


def load_airports(path: Path) -> list[Airport]:
    """Load all usable airports from a GeoJSON file.

    Raises
    ------
    ReferenceDataError
        When the file is missing or not a FeatureCollection.
    """
    features = _read_features(path)
    airports = [a for a in (parse_airport(f) for f in features) if a is not None]
    logger.info("Loaded %d/%d airports from %s", len(airports), len(features), path)
    return airports


def load_navaids(path: Path) -> list[Navaid]:
    """Load all usable NAVAIDs from a GeoJSON file."""
    features = _read_features(path)
    navaids = [n for n in (parse_navaid(f) for f in features) if n is not None]
    logger.info("Loaded %d/%d NAVAIDs from %s", len(navaids), len(features), path)
    return navaids


def group_by_type(items: list[T]) -> dict[str, list[T]]:
    """Group records by their ``type``, preserving input order within groups."""
    groups: dict[str, list[T]] = defaultdict(list)
    for item in items:
        groups[str(item.type)].append(item)
    return dict(groups)
