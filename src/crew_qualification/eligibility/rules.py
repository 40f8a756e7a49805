from __future__ import annotations

from enum import Enum
from typing import Dict, FrozenSet, Iterable, Optional

from crew_qualification.domain.aircraft import Aircraft
from crew_qualification.domain.crew import CrewMember, Position
from crew_qualification.domain.qualification import Qualification, QualificationKind
from crew_qualification.eligibility.matching import aircraft_type_matches
from crew_qualification.eligibility.validity import Instant, effectively_valid

CABIN_SAFETY_CODE = "CABIN-SAFETY"


class RequirementKind(str, Enum):
    TYPE_RATING_FOR_AIRCRAFT = "type_rating_for_aircraft"
    CABIN_SAFETY_TRAINING = "cabin_safety_training"
    NONE = "none"


# One entry per position. Positions mapped to NONE are never eligible.
POSITION_REQUIREMENTS: Dict[Position, RequirementKind] = {
    Position.CAPTAIN: RequirementKind.TYPE_RATING_FOR_AIRCRAFT,
    Position.FIRST_OFFICER: RequirementKind.TYPE_RATING_FOR_AIRCRAFT,
    Position.FLIGHT_ATTENDANT: RequirementKind.CABIN_SAFETY_TRAINING,
    Position.SENIOR_FLIGHT_ATTENDANT: RequirementKind.CABIN_SAFETY_TRAINING,
    Position.OTHER: RequirementKind.NONE,
}

PILOT_POSITIONS: FrozenSet[Position] = frozenset(
    p for p, r in POSITION_REQUIREMENTS.items() if r is RequirementKind.TYPE_RATING_FOR_AIRCRAFT
)
CABIN_CREW_POSITIONS: FrozenSet[Position] = frozenset(
    p for p, r in POSITION_REQUIREMENTS.items() if r is RequirementKind.CABIN_SAFETY_TRAINING
)


def requirement_for(position: Position) -> RequirementKind:
    return POSITION_REQUIREMENTS.get(position, RequirementKind.NONE)


def is_pilot(crew: CrewMember) -> bool:
    return crew.position_kind in PILOT_POSITIONS


def is_cabin_safety_training(q: Qualification, cabin_safety_code: str = CABIN_SAFETY_CODE) -> bool:
    return q.kind == QualificationKind.TRAINING.value and q.code == cabin_safety_code


def _has_type_rating_for(valid: Iterable[Qualification], aircraft: Aircraft) -> bool:
    return any(
        q.kind == QualificationKind.TYPE_RATING.value
        and aircraft_type_matches(q.aircraft_type, aircraft)
        for q in valid
    )


def is_eligible(
        crew: CrewMember,
        aircraft: Optional[Aircraft],
        qualifications: Iterable[Qualification],
        now: Instant,
        *,
        cabin_safety_code: str = CABIN_SAFETY_CODE,
) -> bool:
    """
    Does the crew member meet the qualification requirement of their
    position for `aircraft`?

    - No aircraft context: everyone is eligible.
    - Pilots: an effectively valid TYPE_RATING matching the aircraft.
    - Cabin crew: an effectively valid cabin safety TRAINING.
    - Any other position: not eligible.

    Missing profile documents do not affect the result.
    """
    if aircraft is None:
        return True

    own = [q for q in qualifications if q.crew_id == crew.crew_id]
    valid = effectively_valid(own, now)

    requirement = requirement_for(crew.position_kind)
    if requirement is RequirementKind.TYPE_RATING_FOR_AIRCRAFT:
        return _has_type_rating_for(valid, aircraft)
    if requirement is RequirementKind.CABIN_SAFETY_TRAINING:
        return any(is_cabin_safety_training(q, cabin_safety_code) for q in valid)
    return False
