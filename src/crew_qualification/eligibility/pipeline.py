from __future__ import annotations

import logging
from collections import defaultdict
from typing import Dict, List, Optional, Sequence

from crew_qualification.domain.aircraft import Aircraft
from crew_qualification.domain.crew import CrewMember, CrewRole
from crew_qualification.domain.processed import ProcessedCrewMember, QualificationSummary
from crew_qualification.domain.qualification import Qualification, QualificationKind
from crew_qualification.eligibility.documents import missing_documents
from crew_qualification.eligibility.rules import (
    CABIN_SAFETY_CODE,
    is_cabin_safety_training,
    is_eligible,
)
from crew_qualification.eligibility.status import derive_status
from crew_qualification.eligibility.validity import (
    Instant,
    effectively_valid,
    expired_but_flagged_valid,
)

logger = logging.getLogger(__name__)

INTERNAL_LABEL = "Internal"
FREELANCER_LABEL = "Freelancer"


def role_label(crew: CrewMember) -> str:
    return INTERNAL_LABEL if crew.role == CrewRole.INTERNAL.value else FREELANCER_LABEL


def group_by_crew(qualifications: Sequence[Qualification]) -> Dict[str, List[Qualification]]:
    by_crew: Dict[str, List[Qualification]] = defaultdict(list)
    for q in qualifications:
        by_crew[q.crew_id].append(q)
    return by_crew


def summarize_qualifications(
        own: Sequence[Qualification],
        now: Instant,
        cabin_safety_code: str = CABIN_SAFETY_CODE,
) -> QualificationSummary:
    valid = effectively_valid(own, now)
    return QualificationSummary(
        valid=valid,
        expired=expired_but_flagged_valid(own, now),
        has_type_rating=any(q.kind == QualificationKind.TYPE_RATING.value for q in valid),
        has_cabin_safety=any(is_cabin_safety_training(q, cabin_safety_code) for q in valid),
    )


def process_member(
        crew: CrewMember,
        aircraft: Optional[Aircraft],
        own: Sequence[Qualification],
        now: Instant,
        *,
        cabin_safety_code: str = CABIN_SAFETY_CODE,
) -> ProcessedCrewMember:
    qualified = is_eligible(crew, aircraft, own, now, cabin_safety_code=cabin_safety_code)
    missing = missing_documents(crew, own, now)

    return ProcessedCrewMember(
        crew_id=crew.crew_id,
        name=crew.name,
        role_label=role_label(crew),
        position=crew.position,
        status_badge=derive_status(crew, qualified, missing),
        missing_documents=missing,
        qualified=qualified,
        qualifications=summarize_qualifications(own, now, cabin_safety_code),
        email=crew.email,
        phone=crew.phone,
        employee_code=crew.employee_code,
    )


def process_crew(
        aircraft: Optional[Aircraft],
        crew: Sequence[CrewMember],
        qualifications: Sequence[Qualification],
        now: Instant,
        *,
        cabin_safety_code: str = CABIN_SAFETY_CODE,
) -> List[ProcessedCrewMember]:
    """
    Evaluate every crew member against `aircraft`.

    Returns one ProcessedCrewMember per input crew member, in input order.
    `now` is taken once by the caller so every expiry check of the pass
    sees the same instant. Inputs are never mutated.
    """
    by_crew = group_by_crew(qualifications)

    processed = [
        process_member(c, aircraft, by_crew.get(c.crew_id, []), now, cabin_safety_code=cabin_safety_code)
        for c in crew
    ]

    logger.debug(
        "Processed %d crew members against %s: %d qualified",
        len(processed),
        aircraft.registration if aircraft else "no aircraft",
        sum(1 for p in processed if p.qualified),
    )
    return processed
