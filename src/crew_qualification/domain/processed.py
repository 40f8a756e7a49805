from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from crew_qualification.domain.qualification import Qualification


class BadgeColor(str, Enum):
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    GRAY = "gray"


@dataclass(frozen=True)
class StatusBadge:
    text: str
    color: BadgeColor


@dataclass(frozen=True)
class QualificationSummary:
    """
    Qualification breakdown of one crew member.

    Attributes
    ----------
    valid : List[Qualification]
        Effectively valid qualifications.
    expired : List[Qualification]
        Qualifications flagged valid but past their expiry date.
    has_type_rating : bool
        Any effectively valid TYPE_RATING, whatever the aircraft.
    has_cabin_safety : bool
        Any effectively valid cabin safety TRAINING.
    """
    valid: List[Qualification] = field(default_factory=list)
    expired: List[Qualification] = field(default_factory=list)
    has_type_rating: bool = False
    has_cabin_safety: bool = False


@dataclass(frozen=True)
class ProcessedCrewMember:
    """
    Display-ready view of one crew member against one aircraft context.

    Built fresh on every pipeline pass and never persisted. Only
    crew_id ties it back to the source record.
    """
    crew_id: str
    name: str
    role_label: str
    position: str
    status_badge: StatusBadge
    missing_documents: List[str]
    qualified: bool
    qualifications: QualificationSummary
    email: Optional[str] = None
    phone: Optional[str] = None
    employee_code: Optional[str] = None
