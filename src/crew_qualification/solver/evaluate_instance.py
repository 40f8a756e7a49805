from __future__ import annotations

import json
import logging
from dataclasses import asdict
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from crew_qualification.domain.aircraft import Aircraft
from crew_qualification.domain.processed import ProcessedCrewMember
from crew_qualification.eligibility.pipeline import process_crew
from crew_qualification.eligibility.rules import CABIN_SAFETY_CODE
from crew_qualification.eligibility.selection import describe_crew_list
from crew_qualification.preprocessing.coverage_check import check_crew_coverage
from crew_qualification.preprocessing.loaders import (
    aircraft_from_dict,
    crew_from_dict,
    load_aircraft,
    load_crew,
    load_qualifications,
    load_settings,
    parse_now,
    qualification_from_dict,
)
from crew_qualification.preprocessing.roster_filters import find_aircraft
from crew_qualification.preprocessing.validate_records import (
    validate_aircraft,
    validate_crew,
    validate_qualifications,
)
from crew_qualification.visualization.report import build_report_frames, save_plots, save_tables

logger = logging.getLogger(__name__)


def _json_default(value: Any) -> Any:
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    raise TypeError(f"Not JSON serializable: {type(value).__name__}")


def processed_to_dict(p: ProcessedCrewMember) -> Dict[str, Any]:
    d = asdict(p)
    d["status_badge"] = {"text": p.status_badge.text, "color": p.status_badge.color.value}
    for key in ("valid", "expired"):
        for q in d["qualifications"][key]:
            if q["expiry_date"] is not None:
                q["expiry_date"] = q["expiry_date"].isoformat()
    return d


def aircraft_to_dict(a: Optional[Aircraft]) -> Optional[Dict[str, Any]]:
    if a is None:
        return None
    d = asdict(a)
    d["id"] = d.pop("aircraft_id")
    return d


def evaluate_request(payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Single request/response entry point.

    Request:  {"aircraft": {...} | null, "crew": [...], "qualifications": [...], "now": iso}
    Response: {"now": iso, "aircraft": {...} | null, "crew": [processed crew dicts]}

    "now" defaults to the current UTC time, read once for the whole pass.
    """
    now = parse_now(payload["now"]) if payload.get("now") else datetime.now(timezone.utc)
    aircraft_obj = payload.get("aircraft")
    aircraft = aircraft_from_dict(aircraft_obj) if aircraft_obj else None
    crew = [crew_from_dict(c) for c in payload.get("crew", [])]
    qualifications = [qualification_from_dict(q) for q in payload.get("qualifications", [])]

    processed = process_crew(
        aircraft,
        crew,
        qualifications,
        now,
        cabin_safety_code=payload.get("cabin_safety_code", CABIN_SAFETY_CODE),
    )
    return {
        "now": now.isoformat(),
        "aircraft": aircraft_to_dict(aircraft),
        "crew": [processed_to_dict(p) for p in processed],
    }


def evaluate_instance(
    instance_dir: Path,
    *,
    aircraft_registration: Optional[str] = None,
    now: Optional[datetime] = None,
    save_outputs: bool = True,
    with_plots: bool = False,
    out_root: Path = Path("outputs"),
) -> Dict[str, Any]:
    """
    Evaluate one instance directory and return KPIs + output paths.

    The aircraft comes from `aircraft_registration`, else from
    settings.json; with neither, the crew is evaluated without aircraft
    context. Outputs go to <out_root>/<instance_name>/.
    """
    instance_dir = instance_dir.resolve()
    settings = load_settings(instance_dir / "settings.json")
    fleet = load_aircraft(instance_dir / "aircraft.json")
    crew = load_crew(instance_dir / "crew.json")
    qualifications = load_qualifications(instance_dir / "qualifications.json")

    validate_aircraft(fleet)
    validate_crew(crew)
    validate_qualifications(qualifications, crew)

    registration = aircraft_registration or settings.aircraft_registration
    aircraft = find_aircraft(fleet, registration)
    if registration and aircraft is None:
        raise ValueError(f"Aircraft {registration} not found in {instance_dir / 'aircraft.json'}")

    now = now or datetime.now(timezone.utc)
    processed = process_crew(
        aircraft, crew, qualifications, now, cabin_safety_code=settings.cabin_safety_code
    )
    issues = check_crew_coverage(processed, settings.coverage)
    if issues:
        logger.warning("Instance %s: %d position(s) short of qualified crew", instance_dir.name, len(issues))

    result: Dict[str, Any] = {
        "instance_dir": str(instance_dir),
        "instance_name": instance_dir.name,
        "aircraft": aircraft.registration if aircraft else None,
        "now": now.isoformat(),
        "summary": describe_crew_list(processed, aircraft),
        "n_crew": len(processed),
        "n_qualified": sum(1 for p in processed if p.qualified),
        "status_counts": _status_counts(processed),
        "coverage_issues": [asdict(i) for i in issues],
    }

    if not save_outputs:
        return result

    out_dir = out_root / instance_dir.name
    out_dir.mkdir(parents=True, exist_ok=True)

    out_path = out_dir / "processed_crew.json"
    payload = {
        "now": now.isoformat(),
        "aircraft": aircraft_to_dict(aircraft),
        "crew": [processed_to_dict(p) for p in processed],
    }
    out_path.write_text(json.dumps(payload, indent=2, default=_json_default), encoding="utf-8")
    result["processed_json"] = str(out_path)

    frames = build_report_frames(processed)
    save_tables(frames, out_dir)
    result["report_dir"] = str(out_dir)
    if with_plots:
        save_plots(frames, out_dir)

    return result


def _status_counts(processed: Sequence[ProcessedCrewMember]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for p in processed:
        counts[p.status_badge.color.value] = counts.get(p.status_badge.color.value, 0) + 1
    return counts
