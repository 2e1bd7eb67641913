"""Weighted area graph for disaster response.

Areas are named nodes carrying a severity rating. Edges are undirected road
segments with a positive travel distance. A depot area named ``"base"`` is
created with every graph and is where rescue teams start.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List

from .schemas import AreaGraphState, AreaState

DEPOT = "base"

DUPLICATE_POLICIES = ("reject", "overwrite")


# =============================
# Module-level Exceptions
# =============================

class RescueNetError(Exception):
    """Base class for recoverable errors raised by the dispatch core."""


class DuplicateAreaError(RescueNetError):
    """Raised when an area name is added twice under the ``reject`` policy."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Area '{name}' already exists")


class UnknownAreaError(RescueNetError):
    """Raised when an operation references areas that are not in the graph."""

    def __init__(self, names: List[str]) -> None:
        self.names = list(names)
        joined = ", ".join(f"'{n}'" for n in self.names)
        super().__init__(f"Unknown area(s): {joined}")


@dataclass
class Area:
    """A location with a rescue priority and weighted links to its neighbors."""

    name: str
    severity: int = 0
    neighbors: Dict[str, int] = field(default_factory=dict)


@dataclass
class AreaGraph:
    """Table of areas keyed by name with symmetric weighted adjacency.

    ``duplicate_policy`` decides what ``add_area`` does with a name that is
    already present: ``"reject"`` raises ``DuplicateAreaError``, while
    ``"overwrite"`` replaces the severity and keeps existing edges. The depot
    can never be re-added under either policy.
    """

    duplicate_policy: str = "reject"
    areas: Dict[str, Area] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.duplicate_policy not in DUPLICATE_POLICIES:
            raise ValueError(
                f"duplicate_policy must be one of {DUPLICATE_POLICIES}, "
                f"got '{self.duplicate_policy}'"
            )
        # Depot always exists, always first in iteration order.
        if DEPOT not in self.areas:
            self.areas = {DEPOT: Area(name=DEPOT, severity=0), **self.areas}

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_area(self, name: str, severity: int) -> Area:
        if not name:
            raise ValueError("Area name must be a non-empty string")
        if severity < 0:
            raise ValueError(f"Severity must be >= 0, got {severity}")
        if name == DEPOT:
            raise DuplicateAreaError(name)

        existing = self.areas.get(name)
        if existing is not None:
            if self.duplicate_policy == "reject":
                raise DuplicateAreaError(name)
            existing.severity = severity
            return existing

        area = Area(name=name, severity=severity)
        self.areas[name] = area
        return area

    def connect_areas(self, a: str, b: str, weight: int) -> None:
        """Insert (or re-weight) the undirected edge ``a <-> b``."""
        missing = [n for n in (a, b) if n not in self.areas]
        if missing:
            raise UnknownAreaError(missing)
        if a == b:
            raise ValueError(f"Cannot connect area '{a}' to itself")
        if weight <= 0:
            raise ValueError(f"Distance must be a positive integer, got {weight}")

        self.areas[a].neighbors[b] = weight
        self.areas[b].neighbors[a] = weight

    def set_severity(self, name: str, severity: int) -> None:
        area = self._require(name)
        if severity < 0:
            raise ValueError(f"Severity must be >= 0, got {severity}")
        if name == DEPOT and severity != 0:
            raise ValueError("The depot's severity is fixed at 0")
        area.severity = severity

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def neighbors_of(self, name: str) -> Dict[str, int]:
        return dict(self._require(name).neighbors)

    def severity_of(self, name: str) -> int:
        return self._require(name).severity

    def has_area(self, name: str) -> bool:
        return name in self.areas

    def names(self) -> List[str]:
        return list(self.areas)

    def to_state(self) -> AreaGraphState:
        return AreaGraphState(
            areas={
                area.name: AreaState(
                    name=area.name,
                    severity=area.severity,
                    neighbors=dict(area.neighbors),
                )
                for area in self.areas.values()
            }
        )

    def __contains__(self, name: object) -> bool:
        return name in self.areas

    def __iter__(self) -> Iterator[Area]:
        return iter(self.areas.values())

    def __len__(self) -> int:
        return len(self.areas)

    def _require(self, name: str) -> Area:
        area = self.areas.get(name)
        if area is None:
            raise UnknownAreaError([name])
        return area
