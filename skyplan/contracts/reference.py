"""Airport and Navaid — reference records supplied by the GeoJSON loader.

These are read-only inputs: the engine treats them as positions plus
metadata and performs no validation beyond the coordinate bounds.
"""

from pydantic import Field, model_validator

from skyplan.contracts.common import GeoPoint, PlanModel
from skyplan.contracts.enums import AirportType, NavaidType


class Airport(PlanModel):
    """A departure or arrival aerodrome."""

    id: str = Field(..., min_length=1, description="ICAO code, e.g. RJTT")
    name: str = Field(..., min_length=1)
    label: str = ""
    type: AirportType = AirportType.CIVILIAN
    latitude: float = Field(..., ge=-90.0, le=90.0)
    longitude: float = Field(..., ge=-180.0, le=180.0)

    @model_validator(mode="after")
    def default_label(self) -> "Airport":
        if not self.label:
            self.label = f"{self.name} ({self.id})"
        return self

    @property
    def position(self) -> GeoPoint:
        return GeoPoint(latitude=self.latitude, longitude=self.longitude)


class Navaid(PlanModel):
    """A ground-based radio navigation aid with a fixed position."""

    id: str = Field(..., min_length=1, description="Identifier, e.g. HME")
    name: str = Field(..., min_length=1)
    type: NavaidType = NavaidType.VOR
    latitude: float = Field(..., ge=-90.0, le=90.0)
    longitude: float = Field(..., ge=-180.0, le=180.0)
    channel: str | None = Field(default=None, description="TACAN channel, e.g. 110X")
    frequency: float | None = Field(default=None, gt=0, description="VOR frequency in MHz")

    @property
    def label(self) -> str:
        return f"{self.name} ({self.id})"

    @property
    def position(self) -> GeoPoint:
        return GeoPoint(latitude=self.latitude, longitude=self.longitude)
