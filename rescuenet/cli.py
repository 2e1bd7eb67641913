"""
Interactive console for RescueNet.

Menu-driven front end over DispatchEngine: add areas, connect them, register
teams, run a dispatch pass and print a summary. Core errors are reported and
the session continues.

RUN:
    python -m rescuenet
    python -m rescuenet --no-color --overwrite-areas
"""

import argparse
import os
from typing import Callable, List, Optional

from .config import Config
from .dispatch import DispatchEngine
from .environment.graph import AreaGraph, RescueNetError
from .formatting import format_summary
from .logging_utils import Color, colored, log_error, log_info

MENU = (
    "\n===== DISASTER MANAGEMENT SYSTEM =====\n"
    "[1] Add Area\n[2] Connect Areas\n[3] Add Rescue Team\n"
    "[4] Dispatch Rescue Teams (By Severity)\n[5] Show Summary\n[0] Exit"
)

SHOW_MENU = 99
EXIT = 0


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Disaster response dispatch console"
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI colors (same as RESCUENET_NO_COLOR=1)"
    )
    parser.add_argument(
        "--overwrite-areas",
        action="store_true",
        help="Re-adding an area updates its severity instead of failing"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Explain team selection during dispatch"
    )
    return parser.parse_args(argv)


class MenuSession:
    """Reads menu choices and forwards them to a DispatchEngine."""

    def __init__(self, engine: DispatchEngine, input_fn: Optional[Callable[[str], str]] = None):
        self.engine = engine
        self._input = input_fn or input
        self._handlers = {
            1: self.add_area,
            2: self.connect_areas,
            3: self.add_team,
            4: self.dispatch,
            5: self.show_summary,
        }

    def run(self) -> None:
        print(MENU)
        while True:
            try:
                raw = self._input("\nEnter your choice (type 99 to show menu): ")
            except EOFError:
                break

            choice = self._parse_int(raw)
            if choice is None:
                log_error("Invalid choice.")
                continue
            if choice == EXIT:
                break
            if choice == SHOW_MENU:
                print(MENU)
                continue

            handler = self._handlers.get(choice)
            if handler is None:
                log_error("Invalid choice.")
                continue
            try:
                handler()
            except EOFError:
                break
            except (RescueNetError, ValueError) as exc:
                log_error(str(exc))

        print(colored("[EXIT] Disaster Management System Closed.", Color.CYAN))

    def add_area(self) -> None:
        name = self._input("Enter area name: ").strip()
        severity = self._read_int("Enter severity (1-10): ")
        self.engine.add_area(name, severity)

    def connect_areas(self) -> None:
        a = self._input("Enter area 1: ").strip()
        b = self._input("Enter area 2: ").strip()
        distance = self._read_int("Enter distance: ")
        self.engine.connect_areas(a, b, distance)

    def add_team(self) -> None:
        team_id = self._input("Enter rescue team name: ").strip()
        self.engine.add_team(team_id)

    def dispatch(self) -> None:
        report = self.engine.dispatch_all()
        if not report.outcomes:
            log_info("No areas need rescue.")

    def show_summary(self) -> None:
        print()
        print(format_summary(self.engine.summary()))

    def _read_int(self, prompt: str) -> int:
        value = self._parse_int(self._input(prompt))
        if value is None:
            raise ValueError("Expected a whole number.")
        return value

    @staticmethod
    def _parse_int(raw: str) -> Optional[int]:
        try:
            return int(raw.strip())
        except ValueError:
            return None


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    if args.no_color:
        os.environ["RESCUENET_NO_COLOR"] = "1"

    try:
        Config.validate()
    except ValueError as exc:
        log_error(str(exc))
        return
    policy = "overwrite" if args.overwrite_areas else Config.DUPLICATE_AREAS
    engine = DispatchEngine(
        AreaGraph(duplicate_policy=policy),
        verbose=args.verbose or Config.VERBOSE,
    )
    MenuSession(engine).run()


if __name__ == "__main__":
    main()
