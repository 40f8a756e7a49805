from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional


class QualificationKind(str, Enum):
    TYPE_RATING = "TYPE_RATING"
    LICENSE = "LICENSE"
    TRAINING = "TRAINING"
    COMPETENCY = "COMPETENCY"


@dataclass(frozen=True)
class Qualification:
    """
    Represents one qualification held by a crew member.

    A qualification is effectively valid only when the issuing authority
    flagged it valid AND it has not expired. A record with valid=False
    never counts, whatever its expiry date.

    Attributes
    ----------
    qualification_id : str
        Unique identifier of the record.
    crew_id : str
        Crew member this qualification belongs to.
    kind : str
        One of TYPE_RATING / LICENSE / TRAINING / COMPETENCY.
    code : str, optional
        Free-form code (e.g. "CABIN-SAFETY", "ATPL").
    name : str, optional
        Display name.
    aircraft_type : str, optional
        Free text aircraft type, populated for TYPE_RATING.
    level : str, optional
        License level, populated for LICENSE.
    valid : bool
        Validity flag set by the issuing authority.
    expiry_date : date, optional
        Expiry date. None means the qualification never expires.
    """
    qualification_id: str
    crew_id: str
    kind: str
    code: Optional[str] = None
    name: Optional[str] = None
    aircraft_type: Optional[str] = None
    level: Optional[str] = None
    valid: bool = False
    expiry_date: Optional[date] = None
