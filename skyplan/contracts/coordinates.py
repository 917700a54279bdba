"""DMS value types exchanged with coordinate entry fields."""

from pydantic import BaseModel, ConfigDict, Field


class DMSComponents(BaseModel):
    """Fixed-width fields decoded from a compact DMS string.

    Kept as strings so zero-padding survives the trip back to the input
    fields (``"05"`` stays ``"05"``).
    """

    degrees: str = Field(..., pattern=r"^\d{2,3}$")
    minutes: str = Field(..., pattern=r"^\d{2}$")
    seconds: str = Field(..., pattern=r"^\d{2}$")
    hemisphere: str = Field(..., pattern=r"^[NSEW]$")

    model_config = ConfigDict(frozen=True)

    @property
    def is_negative(self) -> bool:
        return self.hemisphere in ("S", "W")
