"""
Example: River Flood Response
=============================

WHAT THIS SHOWS:
- Building an area graph around the depot
- Registering more areas than teams
- Two dispatch passes: depot teams first, then redeployment of the
  nearest deployed team
- An isolated area that no team can reach

RUN:
    python examples/flood_response/run.py
"""

from rescuenet import AreaGraph, DispatchEngine, format_summary


def build_engine() -> DispatchEngine:
    engine = DispatchEngine(AreaGraph())

    # Severity 1-10, higher is more urgent
    engine.add_area("riverside", 9)
    engine.add_area("old_town", 6)
    engine.add_area("hospital", 8)
    engine.add_area("farmland", 3)
    engine.add_area("island", 7)  # bridge washed out: no edges

    engine.connect_areas("base", "old_town", 4)
    engine.connect_areas("old_town", "riverside", 3)
    engine.connect_areas("base", "hospital", 6)
    engine.connect_areas("hospital", "riverside", 2)
    engine.connect_areas("riverside", "farmland", 5)

    engine.add_team("alpha")
    engine.add_team("bravo")
    return engine


def main() -> None:
    engine = build_engine()

    print("\n=== Pass 1 ===")
    report = engine.dispatch_all()
    print(
        f"{len(report.dispatched)} dispatched, "
        f"{len(report.unassigned)} unassigned, "
        f"{len(report.route_unavailable)} unreachable"
    )

    print("\n=== Pass 2 ===")
    engine.dispatch_all()

    print()
    print(format_summary(engine.summary()))


if __name__ == "__main__":
    main()
