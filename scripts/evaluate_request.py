from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from crew_qualification.solver.evaluate_instance import evaluate_request

"""
Evaluate one request file (aircraft + crew + qualifications + now):
    python scripts/evaluate_request.py request.json
    cat request.json | python scripts/evaluate_request.py -
"""


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("request", help="Path to request JSON, or - for stdin")
    parser.add_argument("--out", type=Path, default=None, help="Write response here instead of stdout")
    args = parser.parse_args()

    if args.request == "-":
        payload = json.load(sys.stdin)
    else:
        payload = json.loads(Path(args.request).read_text(encoding="utf-8"))

    response = json.dumps(evaluate_request(payload), indent=2)

    if args.out:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        args.out.write_text(response, encoding="utf-8")
        print(f"Saved: {args.out}")
    else:
        print(response)


if __name__ == "__main__":
    main()
