from __future__ import annotations

import argparse
from pathlib import Path
from collections import Counter

from crew_qualification.preprocessing.loaders import load_aircraft, load_crew, load_qualifications, load_settings
from crew_qualification.preprocessing.validate_records import (
    validate_aircraft,
    validate_crew,
    validate_qualifications,
)


DEFAULT_INSTANCE_DIR = Path("data/demo")


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--instance-dir",
        type=Path,
        default=DEFAULT_INSTANCE_DIR,
        help="Path to instance folder (default: data/demo)",
    )
    args = parser.parse_args()

    inst = args.instance_dir

    settings = load_settings(inst / "settings.json")
    fleet = load_aircraft(inst / "aircraft.json")
    crew = load_crew(inst / "crew.json")
    quals = load_qualifications(inst / "qualifications.json")

    validate_aircraft(fleet)
    validate_crew(crew)
    validate_qualifications(quals, crew)

    print(f"Aircraft: {', '.join(f'{a.registration} ({a.type})' for a in fleet)}")
    print(f"Crew count: {len(crew)}")
    print("Crew by position:", dict(Counter(c.position for c in crew)))
    print("Crew by status:", dict(Counter(c.status for c in crew)))
    print("Qualifications by kind:", dict(Counter(q.kind for q in quals)))
    print(f"Default aircraft: {settings.aircraft_registration or '-'}")
    print(f"Coverage: {settings.coverage}")


if __name__ == "__main__":
    main()
