"""Plain-text renderers for dispatch outcomes and system summaries."""

from typing import Sequence

from .schemas import (
    Dispatched,
    DispatchOutcome,
    RouteUnavailable,
    SystemSummary,
    Unassigned,
)


def format_path(path: Sequence[str]) -> str:
    """Render a route as ``a -> b -> c``."""
    return " -> ".join(path)


def format_outcome(outcome: DispatchOutcome) -> str:
    """Describe one outcome as a single line (no tag, no color)."""
    if isinstance(outcome, Dispatched):
        return (
            f"'{outcome.team_id}' dispatched to {outcome.zone} via: "
            f"{format_path(outcome.path)}"
        )
    if isinstance(outcome, Unassigned):
        return f"No available teams for {outcome.zone}"
    if isinstance(outcome, RouteUnavailable):
        return f"No path from {outcome.from_location} to {outcome.zone}"
    raise TypeError(f"Unknown dispatch outcome: {outcome!r}")


def format_summary(summary: SystemSummary) -> str:
    """Two-section area/team listing."""
    lines = ["--- Area Summary ---"]
    for area in summary.areas:
        lines.append(f"{area.name}: Severity {area.severity}")

    lines.append("")
    lines.append("--- Rescue Teams ---")
    if not summary.teams:
        lines.append("(no teams registered)")
    for team in summary.teams:
        suffix = " [BUSY]" if team.busy else ""
        lines.append(f"Team {team.team_id} at {team.location}{suffix}")
    return "\n".join(lines)
