from __future__ import annotations

import argparse
import json
from datetime import datetime, timezone
from pathlib import Path

from crew_qualification.eligibility.pipeline import process_crew
from crew_qualification.model.assignment_model import build_assignment_model
from crew_qualification.preprocessing.coverage_check import check_crew_coverage
from crew_qualification.preprocessing.loaders import (
    load_aircraft,
    load_crew,
    load_qualifications,
    load_settings,
    parse_now,
)
from crew_qualification.preprocessing.roster_filters import find_aircraft, rosterable_crew
from crew_qualification.solver.assign_crew import solve_assignment


DEFAULT_INSTANCE_DIR = Path("data/demo")


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--instance-dir", type=Path, default=DEFAULT_INSTANCE_DIR)
    parser.add_argument("--aircraft", default=None)
    parser.add_argument("--now", default=None)
    parser.add_argument("--time-limit", type=float, default=10.0)
    args = parser.parse_args()

    inst = args.instance_dir

    settings = load_settings(inst / "settings.json")
    fleet = load_aircraft(inst / "aircraft.json")
    crew = rosterable_crew(load_crew(inst / "crew.json"))
    quals = load_qualifications(inst / "qualifications.json")

    registration = args.aircraft or settings.aircraft_registration
    aircraft = find_aircraft(fleet, registration)
    if aircraft is None:
        print(f"Aircraft not found: {registration}")
        return

    now = parse_now(args.now) if args.now else datetime.now(timezone.utc)
    processed = process_crew(aircraft, crew, quals, now, cabin_safety_code=settings.cabin_safety_code)

    issues = check_crew_coverage(processed, settings.coverage)
    if issues:
        print("\nCoverage issues (model will be infeasible):")
        for i in issues:
            print(f"  {i.position}: required={i.required}, qualified={i.qualified_count}")
        return

    am = build_assignment_model(processed, settings.coverage, settings.weights)
    result = solve_assignment(am, time_limit=args.time_limit)

    print("Status:", result.status)
    if not result.feasible:
        print("No crew assignment found.")
        return

    names = {p.crew_id: p.name for p in processed}
    print(f"\nCrew for {aircraft.registration} ({aircraft.type}):")
    for position in sorted(result.assignments):
        print(f"  {position}: {[names[c] for c in result.assignments[position]]}")

    out_dir = Path("outputs/assignments")
    out_dir.mkdir(parents=True, exist_ok=True)
    out_path = out_dir / f"{aircraft.registration}.json"

    payload = {
        "instance_dir": str(inst),
        "aircraft": aircraft.registration,
        "now": now.isoformat(),
        "status": result.status,
        "objective_value": result.objective,
        "assignments": result.assignments,
    }
    out_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    print(f"\nSaved: {out_path}")


if __name__ == "__main__":
    main()
