from __future__ import annotations

from typing import Optional

from crew_qualification.domain.aircraft import Aircraft


def aircraft_type_matches(qualification_type: Optional[str], aircraft: Aircraft) -> bool:
    """
    True if a type rating's free-text aircraft type refers to `aircraft`.

    Type ratings are recorded as free text ("Phenom 300", sometimes a tail
    number), so this is a case-insensitive substring test against either
    the aircraft type name or its registration.
    """
    if not qualification_type:
        return False
    text = qualification_type.lower()
    for needle in (aircraft.type, aircraft.registration):
        if needle and needle.lower() in text:
            return True
    return False
