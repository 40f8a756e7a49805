from __future__ import annotations

import argparse
import csv
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List

from crew_qualification.preprocessing.loaders import load_aircraft, parse_now
from crew_qualification.solver.evaluate_instance import evaluate_instance

"""
Evaluate the crew of one instance against every aircraft of its fleet:
    python scripts/run_fleet.py --instance-dir data/demo
"""


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--instance-dir", type=Path, default=Path("data/demo"))
    parser.add_argument("--now", default=None)
    parser.add_argument("--save-outputs", action="store_true")
    args = parser.parse_args()

    inst = args.instance_dir
    fleet = load_aircraft(inst / "aircraft.json")
    now = parse_now(args.now) if args.now else datetime.now(timezone.utc)

    fleet_root = Path("outputs/fleet")
    out_root = fleet_root / inst.name
    out_root.mkdir(parents=True, exist_ok=True)

    results: List[Dict[str, Any]] = []

    for a in fleet:
        res = evaluate_instance(
            inst,
            aircraft_registration=a.registration,
            now=now,
            save_outputs=args.save_outputs,
            out_root=fleet_root / a.registration,
        )
        counts = res["status_counts"]
        results.append(
            {
                "registration": a.registration,
                "type": a.type,
                "aircraft_status": a.status,
                "n_crew": res["n_crew"],
                "n_qualified": res["n_qualified"],
                "n_available": counts.get("green", 0),
                "n_docs_missing": counts.get("yellow", 0),
                "n_missing_qualifications": counts.get("red", 0),
                "n_inactive": counts.get("gray", 0),
                "n_coverage_issues": len(res["coverage_issues"]),
            }
        )

    # Write results.csv
    csv_path = out_root / "results.csv"
    fieldnames = list(results[0].keys()) if results else ["registration"]
    with csv_path.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fieldnames)
        w.writeheader()
        for r in results:
            w.writerow(r)

    covered = [r for r in results if r["n_coverage_issues"] == 0]
    summary = {
        "instance": inst.name,
        "now": now.isoformat(),
        "n_aircraft": len(results),
        "n_fully_crewable": len(covered),
        "crewable_rate": (len(covered) / len(results)) if results else 0.0,
    }
    (out_root / "summary.json").write_text(json.dumps(summary, indent=2), encoding="utf-8")

    print(f"Saved: {csv_path}")
    print(f"Saved: {out_root / 'summary.json'}")
    print(f"Crewable: {summary['n_fully_crewable']}/{summary['n_aircraft']} ({summary['crewable_rate']:.0%})")


if __name__ == "__main__":
    main()
