from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Aircraft:
    """
    Represents one aircraft of the fleet.

    An Aircraft is the context a crew list is evaluated against:
    pilots need a type rating matching it, cabin crew need cabin
    safety training.

    Attributes
    ----------
    aircraft_id : str
        Unique identifier of the aircraft.
    registration : str
        Tail number (e.g. "F-HCTC").
    type : str
        Aircraft type name (e.g. "Phenom 300").
    status : str
        Operational status (available / maintenance / unavailable).
    model : str, optional
        Manufacturer model designation.
    manufacturer : str, optional
        Manufacturer name.
    """
    aircraft_id: str
    registration: str
    type: str
    status: str = "available"
    model: Optional[str] = None
    manufacturer: Optional[str] = None
