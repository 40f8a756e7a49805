from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from crew_qualification.domain.aircraft import Aircraft
from crew_qualification.domain.crew import AccountStatus, CrewMember, CrewRole
from crew_qualification.domain.qualification import Qualification
from crew_qualification.eligibility.rules import CABIN_SAFETY_CODE

DEFAULT_WEIGHTS: Dict[str, int] = {"missing_document": 10, "freelancer": 1}


@dataclass(frozen=True)
class EngineSettings:
    aircraft_registration: Optional[str] = None
    cabin_safety_code: str = CABIN_SAFETY_CODE
    coverage: Dict[str, int] = field(default_factory=dict)
    weights: Dict[str, int] = field(default_factory=lambda: dict(DEFAULT_WEIGHTS))


def _read_json(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Missing file: {path}")
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def _opt_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def parse_expiry(value: Any, qualification_id: str = "?") -> Optional[date]:
    """
    Normalize an expiry field to a date.

    Accepts ISO dates ("2025-12-31") and ISO timestamps, which are
    truncated to their date. Empty means no expiry.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        raise ValueError(f"Unparseable expiry_date for qualification {qualification_id}: {value!r}") from None


def parse_now(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        raise ValueError(f"Unparseable timestamp: {value!r}") from None


def aircraft_from_dict(a: Dict[str, Any]) -> Aircraft:
    return Aircraft(
        aircraft_id=str(a["id"]),
        registration=a["registration"],
        type=a["type"],
        status=a.get("status", "available"),
        model=a.get("model"),
        manufacturer=a.get("manufacturer"),
    )


def crew_from_dict(c: Dict[str, Any]) -> CrewMember:
    # Roster feed defaults for incomplete profiles
    return CrewMember(
        crew_id=str(c["id"]),
        name=c.get("name") or "Unknown",
        position=c.get("position") or "Unknown",
        status=c.get("status") or AccountStatus.ACTIVE.value,
        role=c.get("role") or CrewRole.FREELANCER.value,
        email=_opt_str(c.get("email")),
        phone=_opt_str(c.get("phone")),
        address=_opt_str(c.get("address")),
        employee_code=_opt_str(c.get("employee_code")),
    )


def qualification_from_dict(q: Dict[str, Any]) -> Qualification:
    q_id = str(q["id"])
    return Qualification(
        qualification_id=q_id,
        crew_id=str(q["crew_id"]),
        kind=q["kind"],
        code=q.get("code"),
        name=q.get("name"),
        aircraft_type=q.get("aircraft_type"),
        level=q.get("level"),
        valid=bool(q.get("valid", False)),
        expiry_date=parse_expiry(q.get("expiry_date"), q_id),
    )


def load_aircraft(path: Path) -> List[Aircraft]:
    obj = _read_json(path)
    return [aircraft_from_dict(a) for a in obj.get("aircraft", [])]


def load_crew(path: Path) -> List[CrewMember]:
    obj = _read_json(path)
    return [crew_from_dict(c) for c in obj.get("crew", [])]


def load_qualifications(path: Path) -> List[Qualification]:
    obj = _read_json(path)
    return [qualification_from_dict(q) for q in obj.get("qualifications", [])]


def load_settings(path: Path) -> EngineSettings:
    if not path.exists():
        return EngineSettings()  # settings are optional

    obj = _read_json(path)
    weights = dict(DEFAULT_WEIGHTS)
    weights.update({k: int(v) for k, v in obj.get("weights", {}).items()})
    return EngineSettings(
        aircraft_registration=obj.get("aircraft_registration"),
        cabin_safety_code=obj.get("cabin_safety_code", CABIN_SAFETY_CODE),
        coverage={k: int(v) for k, v in obj.get("coverage", {}).items()},
        weights=weights,
    )
