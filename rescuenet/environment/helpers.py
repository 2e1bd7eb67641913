"""Routing utilities for area graphs."""

from __future__ import annotations

import heapq
import math
from typing import Dict, List, Optional, Sequence, Tuple

from .graph import AreaGraph

# Distance reported for pairs with no connecting route (or unknown endpoints).
UNREACHABLE = math.inf


def _dijkstra(
    graph: AreaGraph, start: str, goal: Optional[str] = None
) -> Tuple[Dict[str, float], Dict[str, str]]:
    """Single-source Dijkstra over non-negative edge weights.

    Returns ``(distances, predecessors)``. Areas missing from ``distances`` are
    unreachable from ``start``. When ``goal`` is given the search stops as soon
    as the goal is settled, since its distance can no longer improve.
    """

    dist: Dict[str, float] = {start: 0}
    parent: Dict[str, str] = {}
    settled: set[str] = set()
    # Heap entries are (distance, area_name). Ties resolve by name, which keeps
    # results reproducible regardless of dict ordering.
    heap: List[Tuple[float, str]] = [(0, start)]

    while heap:
        d, node = heapq.heappop(heap)
        # Lazy deletion: a node can be pushed several times as its distance
        # improves. Only the first pop carries the final distance.
        if node in settled:
            continue
        settled.add(node)
        if node == goal:
            break
        for neighbor, weight in graph.areas[node].neighbors.items():
            if neighbor in settled:
                continue
            candidate = d + weight
            if candidate < dist.get(neighbor, UNREACHABLE):
                dist[neighbor] = candidate
                parent[neighbor] = node
                heapq.heappush(heap, (candidate, neighbor))

    return dist, parent


def shortest_distance(graph: AreaGraph, start: str, end: str) -> float:
    """Return the minimum total distance from ``start`` to ``end``.

    Returns ``UNREACHABLE`` if either area is unknown or no route exists.
    """

    if start not in graph or end not in graph:
        return UNREACHABLE
    dist, _ = _dijkstra(graph, start, goal=end)
    return dist.get(end, UNREACHABLE)


def shortest_path(graph: AreaGraph, start: str, end: str) -> List[str]:
    """Return area names from ``start`` to ``end`` inclusive along a shortest route.

    Returns an empty list if either area is unknown or ``end`` is unreachable.
    Among equally short routes the choice of path is implementation-defined.
    """

    if start not in graph or end not in graph:
        return []
    if start == end:
        return [start]

    dist, parent = _dijkstra(graph, start, goal=end)
    if end not in dist:
        return []

    # Walk predecessors back from the goal, then flip into travel order.
    path = [end]
    while path[-1] != start:
        path.append(parent[path[-1]])
    path.reverse()
    return path


def path_length(graph: AreaGraph, path: Sequence[str]) -> float:
    """Sum the edge weights along ``path``.

    Returns ``UNREACHABLE`` for an empty path or one that uses a missing edge.
    """

    if not path:
        return UNREACHABLE
    total = 0
    for here, there in zip(path, path[1:]):
        if here not in graph:
            return UNREACHABLE
        weight = graph.areas[here].neighbors.get(there)
        if weight is None:
            return UNREACHABLE
        total += weight
    return total


class PathFinder:
    """Shortest-distance and shortest-path queries bound to one ``AreaGraph``.

    Every call re-runs Dijkstra against the graph's current edges, so results
    always reflect the latest ``connect_areas`` calls.
    """

    def __init__(self, graph: AreaGraph):
        self.graph = graph

    def shortest_distance(self, start: str, end: str) -> float:
        return shortest_distance(self.graph, start, end)

    def shortest_path(self, start: str, end: str) -> List[str]:
        return shortest_path(self.graph, start, end)

    def distances_from(self, start: str) -> Dict[str, float]:
        """Return distances from ``start`` to every reachable area."""
        if start not in self.graph:
            return {}
        dist, _ = _dijkstra(self.graph, start)
        return dist
