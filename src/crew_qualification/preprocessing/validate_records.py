from __future__ import annotations

import logging
from typing import Sequence

from crew_qualification.domain.aircraft import Aircraft
from crew_qualification.domain.crew import AccountStatus, CrewMember, CrewRole
from crew_qualification.domain.qualification import Qualification, QualificationKind

logger = logging.getLogger(__name__)

ALLOWED_STATUSES = {s.value for s in AccountStatus}
ALLOWED_ROLES = {r.value for r in CrewRole}
ALLOWED_KINDS = {k.value for k in QualificationKind}


def validate_aircraft(fleet: Sequence[Aircraft]) -> None:
    ids = [a.aircraft_id for a in fleet]
    if len(set(ids)) != len(ids):
        raise ValueError("Duplicate aircraft id found in aircraft.json")

    regs = [a.registration.upper() for a in fleet]
    if len(set(regs)) != len(regs):
        raise ValueError("Duplicate registration found in aircraft.json")

    for a in fleet:
        if not a.registration:
            raise ValueError(f"Aircraft {a.aircraft_id} has no registration")
        if not (a.type or "").strip():
            raise ValueError(f"Aircraft {a.registration} has no type")


def validate_crew(crew: Sequence[CrewMember]) -> None:
    ids = [c.crew_id for c in crew]
    if len(set(ids)) != len(ids):
        raise ValueError("Duplicate crew id found in crew.json")

    for c in crew:
        if c.status not in ALLOWED_STATUSES:
            raise ValueError(f"Invalid status for crew {c.crew_id}: {c.status}")
        if c.role not in ALLOWED_ROLES:
            raise ValueError(f"Invalid role for crew {c.crew_id}: {c.role}")


def validate_qualifications(qualifications: Sequence[Qualification], crew: Sequence[CrewMember]) -> None:
    ids = [q.qualification_id for q in qualifications]
    if len(set(ids)) != len(ids):
        raise ValueError("Duplicate qualification id found in qualifications.json")

    crew_ids = {c.crew_id for c in crew}
    for q in qualifications:
        if q.kind not in ALLOWED_KINDS:
            raise ValueError(f"Invalid kind for qualification {q.qualification_id}: {q.kind}")
        if q.crew_id not in crew_ids:
            logger.warning(
                "Qualification %s references unknown crew %s; it will be ignored",
                q.qualification_id,
                q.crew_id,
            )
