"""
Dispatch engine.

Owns no state of its own: the area graph and team registry are injected and
mutated in place during a dispatch pass.

One pass:
1. Snapshot every area with severity > 0 into a max-priority queue
2. Pop the most severe area (ties: area insertion order)
3. Pick a team: first idle team at the depot, else the nearest idle
   deployed team that can reach the area
4. Route the team along a shortest path, move it, mark the area resolved
5. Record an outcome per area (Dispatched / Unassigned / RouteUnavailable)

Each area is popped exactly once per pass, so an area left unassigned keeps
its severity until the next call to ``dispatch_all``.
"""

from __future__ import annotations

import heapq
from typing import List, Optional, Tuple

from .environment.graph import AreaGraph
from .environment.helpers import PathFinder
from .formatting import format_outcome
from .logging_utils import log_dispatch, log_error, log_info, log_success
from .schemas import (
    AreaSeverity,
    Dispatched,
    DispatchOutcome,
    DispatchReport,
    RouteUnavailable,
    SystemSummary,
    Unassigned,
)
from .teams import RescueTeam, TeamRegistry


class DispatchEngine:
    """Assigns idle rescue teams to unresolved areas, most severe first."""

    def __init__(
        self,
        graph: Optional[AreaGraph] = None,
        registry: Optional[TeamRegistry] = None,
        *,
        pathfinder: Optional[PathFinder] = None,
        quiet: bool = False,
        verbose: bool = False,
    ):
        """
        Args:
            graph: Area graph to dispatch over (a fresh one with only the depot if omitted)
            registry: Team roster (empty if omitted)
            pathfinder: Routing backend; defaults to Dijkstra over ``graph``
            quiet: Suppress console output; outcomes are still returned
            verbose: Log team selection details
        """
        self.graph = graph if graph is not None else AreaGraph()
        self.registry = registry if registry is not None else TeamRegistry()
        self.pathfinder = pathfinder or PathFinder(self.graph)
        self.quiet = quiet
        self.verbose = verbose

    # ------------------------------------------------------------------
    # Population (thin wrappers so callers can drive everything from here)
    # ------------------------------------------------------------------

    def add_area(self, name: str, severity: int) -> None:
        self.graph.add_area(name, severity)
        self._log(log_success, f"Area '{name}' added with severity {severity}.")

    def connect_areas(self, a: str, b: str, weight: int) -> None:
        self.graph.connect_areas(a, b, weight)
        self._log(log_success, f"Connected {a} <--> {b} with distance {weight}.")

    def add_team(self, team_id: str) -> None:
        self.registry.add_team(team_id)
        self._log(log_success, f"Rescue team '{team_id}' added at base.")

    # ------------------------------------------------------------------
    # Dispatch pass
    # ------------------------------------------------------------------

    def dispatch_all(self) -> DispatchReport:
        """Run one dispatch pass over every area with severity > 0."""

        queue = self._build_queue()
        outcomes: List[DispatchOutcome] = []

        while queue:
            neg_severity, _, zone = heapq.heappop(queue)
            outcome = self._dispatch_one(zone, -neg_severity)
            outcomes.append(outcome)
            self._log_outcome(outcome)

        return DispatchReport(outcomes=outcomes)

    def _build_queue(self) -> List[Tuple[int, int, str]]:
        # heapq is a min-heap, so severity is negated. The insertion index
        # breaks ties and keeps names from ever being compared.
        queue = [
            (-area.severity, index, area.name)
            for index, area in enumerate(self.graph)
            if area.severity > 0
        ]
        heapq.heapify(queue)
        return queue

    def _dispatch_one(self, zone: str, severity: int) -> DispatchOutcome:
        team = self._select_team(zone)
        if team is None:
            return Unassigned(zone=zone, severity=severity)

        origin = team.location
        path = self.pathfinder.shortest_path(origin, zone)
        if not path:
            return RouteUnavailable(
                team_id=team.team_id,
                zone=zone,
                severity=severity,
                from_location=origin,
            )

        distance = self.pathfinder.shortest_distance(origin, zone)

        # Rescue is instantaneous: the team ends the step idle at the zone.
        team.location = zone
        team.busy = False
        self.graph.set_severity(zone, 0)

        return Dispatched(
            team_id=team.team_id,
            zone=zone,
            severity=severity,
            from_location=origin,
            path=path,
            distance=int(distance),
        )

    def _select_team(self, zone: str) -> Optional[RescueTeam]:
        """Depot teams win outright; otherwise pick the nearest reachable deployed team."""

        team = self.registry.find_idle_at_base()
        if team is not None:
            if self.verbose:
                self._log(log_info, f"{zone}: using depot team '{team.team_id}'")
            return team

        team = self.registry.find_nearest_idle_deployed(
            zone, self.pathfinder.shortest_distance
        )
        if team is not None and self.verbose:
            self._log(
                log_info,
                f"{zone}: no depot team idle, nearest deployed team is "
                f"'{team.team_id}' at {team.location}",
            )
        return team

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    def summary(self) -> SystemSummary:
        return SystemSummary(
            areas=[AreaSeverity(name=a.name, severity=a.severity) for a in self.graph],
            teams=list(self.registry.list_teams()),
        )

    def _log_outcome(self, outcome: DispatchOutcome) -> None:
        message = format_outcome(outcome)
        if isinstance(outcome, Dispatched):
            self._log(log_dispatch, message)
        elif isinstance(outcome, Unassigned):
            self._log(log_info, message)
        else:
            self._log(log_error, message)

    def _log(self, logger, message: str) -> None:
        if not self.quiet:
            logger(message)
