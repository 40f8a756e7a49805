from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Position(str, Enum):
    CAPTAIN = "Captain"
    FIRST_OFFICER = "First Officer"
    FLIGHT_ATTENDANT = "Flight Attendant"
    SENIOR_FLIGHT_ATTENDANT = "Senior Flight Attendant"
    OTHER = "Other"

    @classmethod
    def from_label(cls, label: Optional[str]) -> "Position":
        """Exact match on the roster label; anything unrecognised is OTHER."""
        for p in cls:
            if p is not cls.OTHER and p.value == label:
                return p
        return cls.OTHER


class AccountStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"


class CrewRole(str, Enum):
    INTERNAL = "internal"
    FREELANCER = "freelancer"
    ADMIN = "admin"


@dataclass(frozen=True)
class CrewMember:
    """
    Represents a single crew member from the roster feed.

    The engine only reads crew members; it never mutates them.
    Every optional contact field may be None or empty, in which case
    it shows up as a missing document rather than an error.

    Attributes
    ----------
    crew_id : str
        Unique identifier of the crew member.
    name : str
        Display name.
    position : str
        Position label as recorded on the roster (e.g. "Captain").
        Shown as-is; mapped to a Position for rule dispatch.
    status : str
        Account status (active / inactive / suspended).
    role : str
        Role classification (internal / freelancer / admin).
    email : str, optional
        Contact email. Used by the roster search.
    phone : str, optional
        Contact phone number.
    address : str, optional
        Postal address.
    employee_code : str, optional
        External employee code.
    """
    crew_id: str
    name: str
    position: str
    status: str = AccountStatus.ACTIVE.value
    role: str = CrewRole.FREELANCER.value
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    employee_code: Optional[str] = None

    @property
    def position_kind(self) -> Position:
        return Position.from_label(self.position)

    @property
    def is_active(self) -> bool:
        return self.status == AccountStatus.ACTIVE.value
