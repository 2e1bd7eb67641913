"""Pydantic snapshots of the area graph.

These models mirror the dataclasses in ``graph.py`` so callers can report or
serialize the graph without holding references to live, mutable areas.
"""

from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, Field


class AreaState(BaseModel):
    """Immutable view of a single area."""

    model_config = {"frozen": True}

    name: str
    severity: int = Field(..., ge=0, description="Rescue priority; 0 means resolved")
    neighbors: Dict[str, int] = Field(
        default_factory=dict,
        description="Map of neighbor name → travel distance",
    )


class AreaGraphState(BaseModel):
    """Snapshot of every area in insertion order (depot first)."""

    areas: Dict[str, AreaState] = Field(
        default_factory=dict,
        description="Map of area name → area snapshot",
    )

    def unresolved(self) -> Dict[str, int]:
        """Return ``name → severity`` for areas still needing a team."""
        return {name: a.severity for name, a in self.areas.items() if a.severity > 0}
