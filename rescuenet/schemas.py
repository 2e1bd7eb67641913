"""
Pydantic schemas for the RescueNet dispatch core.

Everything the core hands back to callers is defined here: team snapshots,
per-area dispatch outcomes, and the system summary.

Design Philosophy:
- Outcomes are data, not exceptions. "No team" and "no route" are normal
  results of a dispatch pass and are reported per area.
- Snapshots are frozen copies; mutating them never touches live state.
"""

from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, Field


# ============================================================================
# Team Schemas
# ============================================================================

class TeamState(BaseModel):
    """Point-in-time view of a rescue team."""

    model_config = {"frozen": True}

    team_id: str = Field(..., description="Unique team identifier")
    location: str = Field(..., description="Name of the area the team is at")
    busy: bool = Field(False, description="Whether the team is mid-rescue")


# ============================================================================
# Dispatch Outcomes
# ============================================================================

class Dispatched(BaseModel):
    """A team was routed to an area and the area was resolved."""

    model_config = {"frozen": True}

    kind: Literal["dispatched"] = "dispatched"
    team_id: str
    zone: str = Field(..., description="Area the team was sent to")
    severity: int = Field(..., gt=0, description="Severity of the area before dispatch")
    from_location: str = Field(..., description="Where the team started its trip")
    path: List[str] = Field(..., min_length=1, description="Route from start to zone inclusive")
    distance: int = Field(..., ge=0, description="Total travel distance along path")


class Unassigned(BaseModel):
    """No eligible team existed for an area; its severity is unchanged."""

    model_config = {"frozen": True}

    kind: Literal["unassigned"] = "unassigned"
    zone: str
    severity: int = Field(..., gt=0)


class RouteUnavailable(BaseModel):
    """A team was selected but no route connects it to the area."""

    model_config = {"frozen": True}

    kind: Literal["route_unavailable"] = "route_unavailable"
    team_id: str
    zone: str
    severity: int = Field(..., gt=0)
    from_location: str


# Tagged union so serialized reports round-trip to the right outcome class.
DispatchOutcome = Annotated[
    Union[Dispatched, Unassigned, RouteUnavailable],
    Field(discriminator="kind"),
]


class DispatchReport(BaseModel):
    """Ordered outcomes of one dispatch pass (highest severity first)."""

    outcomes: List[DispatchOutcome] = Field(default_factory=list)

    @property
    def dispatched(self) -> List[Dispatched]:
        return [o for o in self.outcomes if isinstance(o, Dispatched)]

    @property
    def unassigned(self) -> List[Unassigned]:
        return [o for o in self.outcomes if isinstance(o, Unassigned)]

    @property
    def route_unavailable(self) -> List[RouteUnavailable]:
        return [o for o in self.outcomes if isinstance(o, RouteUnavailable)]

    def zones(self) -> List[str]:
        """Areas in the order the pass processed them."""
        return [o.zone for o in self.outcomes]


# ============================================================================
# Summary
# ============================================================================

class AreaSeverity(BaseModel):
    """Name and current severity of one area."""

    model_config = {"frozen": True}

    name: str
    severity: int = Field(..., ge=0)


class SystemSummary(BaseModel):
    """Areas and teams in insertion order, for reporting."""

    areas: List[AreaSeverity] = Field(default_factory=list)
    teams: List[TeamState] = Field(default_factory=list)
