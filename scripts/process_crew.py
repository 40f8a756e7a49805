from __future__ import annotations

import argparse
import logging
from datetime import datetime, timezone
from pathlib import Path

from crew_qualification.preprocessing.loaders import parse_now
from crew_qualification.solver.evaluate_instance import evaluate_instance


DEFAULT_INSTANCE_DIR = Path("data/demo")


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--instance-dir", type=Path, default=DEFAULT_INSTANCE_DIR)
    parser.add_argument("--aircraft", default=None, help="Registration, overrides settings.json")
    parser.add_argument("--now", default=None, help="ISO timestamp used for expiry checks")
    parser.add_argument("--out-root", type=Path, default=Path("outputs"))
    parser.add_argument("--plots", action="store_true")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    now = parse_now(args.now) if args.now else datetime.now(timezone.utc)

    res = evaluate_instance(
        args.instance_dir,
        aircraft_registration=args.aircraft,
        now=now,
        with_plots=args.plots,
        out_root=args.out_root,
    )

    print(res["summary"])
    print("\nStatus")
    for color, n in sorted(res["status_counts"].items()):
        print(f"  {color}: {n}")

    if res["coverage_issues"]:
        print("\nCoverage issues:")
        for i in res["coverage_issues"]:
            print(f"  {i['position']}: required={i['required']}, qualified={i['qualified_count']}")

    print("\nOutputs")
    print(f"  processed_json: {res['processed_json']}")
    print(f"  report_dir: {res['report_dir']}")


if __name__ == "__main__":
    main()
