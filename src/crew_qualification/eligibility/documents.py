from __future__ import annotations

from typing import Iterable, List, Optional

from crew_qualification.domain.crew import CrewMember
from crew_qualification.domain.qualification import Qualification, QualificationKind
from crew_qualification.eligibility.rules import is_pilot
from crew_qualification.eligibility.validity import (
    Instant,
    expired_but_flagged_valid,
    is_effectively_valid,
)

PHONE = "Phone"
ADDRESS = "Address"
EMPLOYEE_CODE = "Employee code"
VALID_LICENSE = "Valid License"


def _present(value: Optional[str]) -> bool:
    # Whitespace-only values count as missing, unlike a plain truthiness check.
    return bool(value and str(value).strip())


def expired_entry(count: int) -> str:
    return f"{count} expired qualification(s)"


def missing_documents(
        crew: CrewMember,
        qualifications: Iterable[Qualification],
        now: Instant,
) -> List[str]:
    """
    List the profile, document and qualification gaps of a crew member.

    Checks run in a fixed order (phone, address, employee code, expired
    qualifications, pilot license) so identical input yields identical
    output. Independent of eligibility.
    """
    own = [q for q in qualifications if q.crew_id == crew.crew_id]
    missing: List[str] = []

    if not _present(crew.phone):
        missing.append(PHONE)
    if not _present(crew.address):
        missing.append(ADDRESS)
    if not _present(crew.employee_code):
        missing.append(EMPLOYEE_CODE)

    # One summary entry, not one per expired record
    expired = expired_but_flagged_valid(own, now)
    if expired:
        missing.append(expired_entry(len(expired)))

    if is_pilot(crew):
        has_license = any(
            q.kind == QualificationKind.LICENSE.value and is_effectively_valid(q, now)
            for q in own
        )
        if not has_license:
            missing.append(VALID_LICENSE)

    return missing
