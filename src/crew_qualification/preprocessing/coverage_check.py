from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence

from crew_qualification.domain.processed import BadgeColor, ProcessedCrewMember


@dataclass(frozen=True)
class CoverageIssue:
    position: str
    required: int
    qualified_count: int
    qualified_crew_ids: List[str]


def is_assignable(p: ProcessedCrewMember) -> bool:
    """Qualified for the aircraft and not on an inactive account."""
    return p.qualified and p.status_badge.color != BadgeColor.GRAY


def check_crew_coverage(
    processed: Sequence[ProcessedCrewMember],
    coverage: Dict[str, int],
) -> List[CoverageIssue]:
    """
    For each required position, verify there are at least `required`
    assignable crew members holding that position.
    Returns a list of issues (empty => coverage feasible).
    """
    issues: List[CoverageIssue] = []

    for position, required_n in coverage.items():
        assignable = [
            p.crew_id
            for p in processed
            if p.position == position and is_assignable(p)
        ]
        count = len(assignable)

        if count < int(required_n):
            issues.append(
                CoverageIssue(
                    position=position,
                    required=int(required_n),
                    qualified_count=count,
                    qualified_crew_ids=sorted(assignable),
                )
            )

    # Sort: largest shortfall first, then by position
    issues.sort(key=lambda x: (x.qualified_count - x.required, x.position))
    return issues
