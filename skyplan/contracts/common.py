"""Base classes and shared types for SkyPlan contracts.

Unit conventions (all contracts and API responses):
- **Distances**: nautical miles (NM) — suffix ``_nm`` where ambiguous
- **Speeds**: knots (kt); ``speed`` is indicated airspeed, ``tas`` true airspeed
- **Altitudes**: feet — suffix ``_ft`` where ambiguous
- **Bearings**: degrees true, not normalized by the engine
- **Times**: local 24-hour clock strings ``HH:MM``
- **Coordinates**: WGS84 decimal degrees
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class PlanModel(BaseModel):
    """Base model with JSON-friendly serialization.

    - Enums serialize as string values.
    - ``to_dict()`` produces a JSON-safe dict without unset optionals.
    - ``from_dict()`` hydrates from such a dict.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
    )

    def to_dict(self) -> dict[str, Any]:
        """Dump to a JSON-compatible dict."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PlanModel":
        """Create model instance from a plain dict."""
        return cls.model_validate(data)


class GeoPoint(BaseModel):
    """WGS84 geographic coordinate.

    Out-of-range values are rejected, never clamped.
    """

    latitude: float = Field(..., ge=-90.0, le=90.0)
    longitude: float = Field(..., ge=-180.0, le=180.0)

    model_config = ConfigDict(frozen=True)
