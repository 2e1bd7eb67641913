"""
Rescue team roster.

TeamRegistry stores teams in insertion order and answers the two selection
queries the dispatch engine needs:
- the first idle team still waiting at the depot
- the idle deployed team closest to a target area
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterator, Optional

from .environment.graph import DEPOT, RescueNetError
from .environment.helpers import UNREACHABLE
from .schemas import TeamState


class DuplicateTeamError(RescueNetError):
    """Raised when a team id is registered twice."""

    def __init__(self, team_id: str) -> None:
        self.team_id = team_id
        super().__init__(f"Rescue team '{team_id}' already exists")


@dataclass
class RescueTeam:
    """A mobile rescue unit. Starts idle at the depot."""

    team_id: str
    location: str = DEPOT
    busy: bool = False

    @property
    def at_depot(self) -> bool:
        return self.location == DEPOT

    @property
    def idle(self) -> bool:
        return not self.busy

    def snapshot(self) -> TeamState:
        return TeamState(team_id=self.team_id, location=self.location, busy=self.busy)


class TeamListing:
    """Restartable view over the registry; each iteration yields fresh snapshots."""

    def __init__(self, teams: Dict[str, RescueTeam]):
        self._teams = teams

    def __iter__(self) -> Iterator[TeamState]:
        for team in self._teams.values():
            yield team.snapshot()

    def __len__(self) -> int:
        return len(self._teams)


class TeamRegistry:
    """Teams keyed by id, iterated in registration order."""

    def __init__(self) -> None:
        # Dict preserves insertion order, which doubles as the tie-break order
        # for both selection queries below.
        self._teams: Dict[str, RescueTeam] = {}

    def add_team(self, team_id: str) -> RescueTeam:
        if not team_id:
            raise ValueError("Team id must be a non-empty string")
        if team_id in self._teams:
            raise DuplicateTeamError(team_id)
        team = RescueTeam(team_id=team_id)
        self._teams[team_id] = team
        return team

    def get(self, team_id: str) -> Optional[RescueTeam]:
        return self._teams.get(team_id)

    def list_teams(self) -> TeamListing:
        return TeamListing(self._teams)

    def find_idle_at_base(self) -> Optional[RescueTeam]:
        """Return the first idle team at the depot, or None. Distance is ignored."""
        for team in self._teams.values():
            if team.idle and team.at_depot:
                return team
        return None

    def find_nearest_idle_deployed(
        self,
        target: str,
        distance_fn: Callable[[str, str], float],
    ) -> Optional[RescueTeam]:
        """Return the idle off-depot team closest to ``target``.

        Only teams with a finite distance are eligible. Ties keep the team
        registered first (strict less-than during the scan). Returns None when
        no idle deployed team can reach ``target``.
        """

        best: Optional[RescueTeam] = None
        best_distance = UNREACHABLE
        for team in self._teams.values():
            if not team.idle or team.at_depot:
                continue
            distance = distance_fn(team.location, target)
            if distance < best_distance:
                best = team
                best_distance = distance
        return best

    def __contains__(self, team_id: object) -> bool:
        return team_id in self._teams

    def __len__(self) -> int:
        return len(self._teams)
