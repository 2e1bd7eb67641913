"""Area graph and routing for RescueNet."""

from .graph import (
    DEPOT,
    Area,
    AreaGraph,
    DuplicateAreaError,
    RescueNetError,
    UnknownAreaError,
)
from .schemas import AreaGraphState, AreaState
from .helpers import (
    UNREACHABLE,
    PathFinder,
    path_length,
    shortest_distance,
    shortest_path,
)

__all__ = [
    "DEPOT",
    "Area",
    "AreaGraph",
    "DuplicateAreaError",
    "RescueNetError",
    "UnknownAreaError",
    "AreaGraphState",
    "AreaState",
    "UNREACHABLE",
    "PathFinder",
    "path_length",
    "shortest_distance",
    "shortest_path",
]
