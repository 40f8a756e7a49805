from __future__ import annotations

from typing import List, Optional, Sequence

from crew_qualification.domain.aircraft import Aircraft
from crew_qualification.domain.crew import CrewMember, CrewRole


def rosterable_crew(crew: Sequence[CrewMember]) -> List[CrewMember]:
    """Active, non-admin crew: the members crew pickers offer."""
    return [c for c in crew if c.is_active and c.role != CrewRole.ADMIN.value]


def filter_crew(
        crew: Sequence[CrewMember],
        position: Optional[str] = None,
        search: Optional[str] = None,
) -> List[CrewMember]:
    """
    Narrow a roster by exact position label and a case-insensitive
    search over name, email and employee code. Order is preserved.
    """
    out = list(crew)
    if position:
        out = [c for c in out if c.position == position]
    if search:
        term = search.strip().lower()
        out = [
            c for c in out
            if any(term in (v or "").lower() for v in (c.name, c.email, c.employee_code))
        ]
    return out


def find_aircraft(fleet: Sequence[Aircraft], registration: Optional[str]) -> Optional[Aircraft]:
    if not registration:
        return None
    reg = registration.strip().upper()
    for a in fleet:
        if a.registration.upper() == reg:
            return a
    return None
