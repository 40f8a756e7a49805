from __future__ import annotations

from typing import List, Optional, Sequence

from crew_qualification.domain.aircraft import Aircraft
from crew_qualification.domain.processed import ProcessedCrewMember


def qualified_crew(processed: Sequence[ProcessedCrewMember]) -> List[ProcessedCrewMember]:
    return [p for p in processed if p.qualified]


def crew_by_position(processed: Sequence[ProcessedCrewMember], position: str) -> List[ProcessedCrewMember]:
    return [p for p in processed if p.position == position]


def describe_crew_list(
        processed: Sequence[ProcessedCrewMember],
        aircraft: Optional[Aircraft] = None,
        position: Optional[str] = None,
) -> str:
    """Header line for a crew list, e.g. "2/3 crew members qualified on F-HCTC"."""
    total = len(processed)
    n_qualified = len(qualified_crew(processed))

    if aircraft and position:
        return f"{n_qualified}/{total} crew members qualified for {position} on {aircraft.registration}"
    if aircraft:
        return f"{n_qualified}/{total} crew members qualified on {aircraft.registration}"
    if position:
        return f"{total} crew members in {position} position"
    return f"{total} crew members available"
