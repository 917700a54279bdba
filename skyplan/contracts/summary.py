"""FlightSummary and LegDistance — derived route figures.

Calculated on every request from a ``FlightPlan``; never stored.
"""

from pydantic import Field

from skyplan.contracts.common import PlanModel


class LegDistance(PlanModel):
    """Great-circle length of one leg between consecutive route points."""

    from_name: str
    to_name: str
    distance_nm: float = Field(..., ge=0)


class FlightSummary(PlanModel):
    """Everything derived from a flight plan's inputs.

    An incomplete plan (no departure or no arrival) yields zero distance,
    ``00:00`` ETE and a ``--:--`` ETA.
    """

    complete: bool = Field(..., description="Both departure and arrival are set")
    tas: float = Field(..., description="True airspeed in kt")
    mach: float
    total_distance: float = Field(..., ge=0, description="Sum of leg distances in NM")
    ete_minutes: float = Field(..., ge=0)
    ete: str = Field(..., description="Estimated time enroute, HH:MM")
    eta: str = Field(..., description="Estimated time of arrival, HH:MM or --:--")
    legs: list[LegDistance] = Field(default_factory=list)
