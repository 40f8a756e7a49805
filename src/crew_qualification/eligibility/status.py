from __future__ import annotations

from typing import Sequence

from crew_qualification.domain.crew import CrewMember
from crew_qualification.domain.processed import BadgeColor, StatusBadge

INACTIVE = StatusBadge("Inactive", BadgeColor.GRAY)
MISSING_QUALIFICATIONS = StatusBadge("Missing qualifications", BadgeColor.RED)
AVAILABLE = StatusBadge("Available", BadgeColor.GREEN)


def docs_missing_badge(count: int) -> StatusBadge:
    return StatusBadge(f"{count} docs missing", BadgeColor.YELLOW)


def derive_status(crew: CrewMember, eligible: bool, missing: Sequence[str]) -> StatusBadge:
    """
    Collapse account status, eligibility and document gaps into one badge.

    First match wins:
      1. account not active     -> Inactive (gray)
      2. not eligible           -> Missing qualifications (red)
      3. any missing documents  -> "<n> docs missing" (yellow)
      4. otherwise              -> Available (green)
    """
    if not crew.is_active:
        return INACTIVE
    if not eligible:
        return MISSING_QUALIFICATIONS
    if len(missing) > 0:
        return docs_missing_badge(len(missing))
    return AVAILABLE
