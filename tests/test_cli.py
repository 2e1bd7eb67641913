"""Tests for the interactive console."""

import pytest

from rescuenet.cli import MenuSession, main, parse_args
from rescuenet.config import Config
from rescuenet.dispatch import DispatchEngine
from rescuenet.environment import AreaGraph


@pytest.fixture(autouse=True)
def no_color(monkeypatch):
    monkeypatch.setenv("RESCUENET_NO_COLOR", "1")
    monkeypatch.delenv("RESCUENET_VERBOSE", raising=False)


def scripted(lines):
    """input() replacement that replays lines, then signals end of input."""
    remaining = iter(lines)

    def fake_input(prompt: str = "") -> str:
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError

    return fake_input


def run_session(lines, engine=None) -> DispatchEngine:
    engine = engine or DispatchEngine(AreaGraph())
    MenuSession(engine, input_fn=scripted(lines)).run()
    return engine


def test_full_session_dispatches_and_summarizes(capsys):
    engine = run_session(
        [
            "1", "A", "5",
            "1", "B", "8",
            "2", "base", "A", "10",
            "2", "A", "B", "5",
            "3", "T1",
            "4",
            "5",
            "0",
        ]
    )
    out = capsys.readouterr().out

    assert "[SUCCESS] Area 'A' added with severity 5." in out
    assert "[SUCCESS] Connected A <--> B with distance 5." in out
    assert "[SUCCESS] Rescue team 'T1' added at base." in out
    assert "[DISPATCH] 'T1' dispatched to B via: base -> A -> B" in out
    assert "[DISPATCH] 'T1' dispatched to A via: B -> A" in out
    assert "Team T1 at A" in out
    assert "[EXIT] Disaster Management System Closed." in out
    assert engine.graph.severity_of("B") == 0


def test_errors_are_reported_and_session_continues(capsys):
    engine = run_session(
        [
            "1", "A", "5",
            "1", "A", "7",           # duplicate
            "2", "A", "ghost", "3",  # unknown area
            "3", "T1",
            "3", "T1",               # duplicate team
            "1", "C", "lots",        # not a number
            "banana",                # invalid menu choice
            "42",                    # unknown menu number
            "5",
        ]
    )
    out = capsys.readouterr().out

    assert "[ERROR] Area 'A' already exists" in out
    assert "[ERROR] Unknown area(s): 'ghost'" in out
    assert "[ERROR] Rescue team 'T1' already exists" in out
    assert "[ERROR] Expected a whole number." in out
    assert out.count("[ERROR] Invalid choice.") == 2
    # End of input closes the session cleanly after the summary
    assert "A: Severity 5" in out
    assert "[EXIT]" in out
    assert engine.graph.names() == ["base", "A"]


def test_menu_redisplay_and_empty_dispatch(capsys):
    run_session(["99", "4", "0"])
    out = capsys.readouterr().out
    assert out.count("===== DISASTER MANAGEMENT SYSTEM =====") == 2
    assert "[INFO] No areas need rescue." in out


def test_overwrite_policy_from_engine_graph(capsys):
    engine = DispatchEngine(AreaGraph(duplicate_policy="overwrite"))
    run_session(["1", "A", "5", "1", "A", "2", "0"], engine=engine)
    assert engine.graph.severity_of("A") == 2
    assert "[ERROR]" not in capsys.readouterr().out


def test_parse_args_flags():
    args = parse_args(["--no-color", "--overwrite-areas", "--verbose"])
    assert args.no_color and args.overwrite_areas and args.verbose
    defaults = parse_args([])
    assert not (defaults.no_color or defaults.overwrite_areas or defaults.verbose)


def test_main_runs_until_exit(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", scripted(["1", "A", "3", "1", "A", "4", "5", "0"]))
    main(["--overwrite-areas"])
    out = capsys.readouterr().out
    assert "A: Severity 4" in out


def test_main_reports_invalid_config(monkeypatch, capsys):
    monkeypatch.setattr(Config, "DUPLICATE_AREAS", "merge")
    monkeypatch.setattr("builtins.input", scripted(["0"]))
    main([])
    out = capsys.readouterr().out
    assert "[ERROR] RESCUENET_DUPLICATE_AREAS must be one of" in out
    # Console never started
    assert "DISASTER MANAGEMENT SYSTEM" not in out
