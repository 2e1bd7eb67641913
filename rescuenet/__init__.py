"""
RescueNet - disaster-response dispatch over a weighted area graph.

Assigns idle rescue teams to the most severe unresolved areas and routes
each team along a shortest path from where it currently stands.

No file I/O required. No global config.
The graph and team roster are injected by the caller.
"""

__version__ = "0.1.0"

from .dispatch import DispatchEngine
from .teams import DuplicateTeamError, RescueTeam, TeamListing, TeamRegistry
from .environment import (
    DEPOT,
    UNREACHABLE,
    Area,
    AreaGraph,
    AreaGraphState,
    AreaState,
    DuplicateAreaError,
    PathFinder,
    RescueNetError,
    UnknownAreaError,
    path_length,
    shortest_distance,
    shortest_path,
)
from .schemas import (
    AreaSeverity,
    Dispatched,
    DispatchOutcome,
    DispatchReport,
    RouteUnavailable,
    SystemSummary,
    TeamState,
    Unassigned,
)
from .formatting import format_outcome, format_path, format_summary

__all__ = [
    # Engine
    "DispatchEngine",
    # Teams
    "RescueTeam",
    "TeamListing",
    "TeamRegistry",
    # Graph and routing
    "DEPOT",
    "UNREACHABLE",
    "Area",
    "AreaGraph",
    "AreaGraphState",
    "AreaState",
    "PathFinder",
    "path_length",
    "shortest_distance",
    "shortest_path",
    # Errors
    "RescueNetError",
    "DuplicateAreaError",
    "DuplicateTeamError",
    "UnknownAreaError",
    # Outcomes and snapshots
    "AreaSeverity",
    "Dispatched",
    "DispatchOutcome",
    "DispatchReport",
    "RouteUnavailable",
    "SystemSummary",
    "TeamState",
    "Unassigned",
    # Rendering
    "format_outcome",
    "format_path",
    "format_summary",
]
