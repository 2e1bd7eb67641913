"""Tests for outcome schemas and text rendering."""

import pytest
from pydantic import ValidationError

from rescuenet.formatting import format_outcome, format_path, format_summary
from rescuenet.schemas import (
    AreaSeverity,
    Dispatched,
    DispatchReport,
    RouteUnavailable,
    SystemSummary,
    TeamState,
    Unassigned,
)


def make_report() -> DispatchReport:
    return DispatchReport(
        outcomes=[
            Dispatched(
                team_id="T1",
                zone="B",
                severity=8,
                from_location="base",
                path=["base", "A", "B"],
                distance=15,
            ),
            Unassigned(zone="C", severity=4),
            RouteUnavailable(team_id="T2", zone="D", severity=2, from_location="base"),
        ]
    )


def test_report_accessors_split_by_kind():
    report = make_report()
    assert [o.zone for o in report.dispatched] == ["B"]
    assert [o.zone for o in report.unassigned] == ["C"]
    assert [o.zone for o in report.route_unavailable] == ["D"]
    assert report.zones() == ["B", "C", "D"]


def test_report_json_keeps_outcome_types():
    report = make_report()
    restored = DispatchReport.model_validate_json(report.model_dump_json())
    assert restored == report
    assert isinstance(restored.outcomes[2], RouteUnavailable)


def test_outcomes_are_frozen_and_validated():
    outcome = Unassigned(zone="C", severity=4)
    with pytest.raises(ValidationError):
        outcome.severity = 0
    with pytest.raises(ValidationError):
        Unassigned(zone="C", severity=0)
    with pytest.raises(ValidationError):
        Dispatched(
            team_id="T1", zone="B", severity=3, from_location="base", path=[], distance=0
        )


def test_format_outcome_lines():
    dispatched, unassigned, unavailable = make_report().outcomes
    assert format_outcome(dispatched) == (
        "'T1' dispatched to B via: base -> A -> B"
    )
    assert format_outcome(unassigned) == "No available teams for C"
    assert format_outcome(unavailable) == "No path from base to D"
    assert format_path(["solo"]) == "solo"


def test_format_summary_sections():
    summary = SystemSummary(
        areas=[AreaSeverity(name="base", severity=0), AreaSeverity(name="A", severity=5)],
        teams=[
            TeamState(team_id="T1", location="A"),
            TeamState(team_id="T2", location="base", busy=True),
        ],
    )
    text = format_summary(summary)
    assert text.splitlines() == [
        "--- Area Summary ---",
        "base: Severity 0",
        "A: Severity 5",
        "",
        "--- Rescue Teams ---",
        "Team T1 at A",
        "Team T2 at base [BUSY]",
    ]


def test_format_summary_without_teams():
    text = format_summary(SystemSummary(areas=[AreaSeverity(name="base", severity=0)]))
    assert "(no teams registered)" in text
