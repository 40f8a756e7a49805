from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ortools.sat.python import cp_model

from crew_qualification.model.assignment_model import AssignmentModel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AssignmentResult:
    status: str
    objective: Optional[float] = None
    assignments: Dict[str, List[str]] = field(default_factory=dict)  # position -> crew_ids

    @property
    def feasible(self) -> bool:
        return self.status in ("OPTIMAL", "FEASIBLE")


def solve_assignment(
        am: AssignmentModel,
        *,
        time_limit: float = 10.0,
        num_workers: int = 4,
) -> AssignmentResult:
    solver = cp_model.CpSolver()
    solver.parameters.max_time_in_seconds = float(time_limit)
    solver.parameters.num_workers = int(num_workers)

    status = solver.Solve(am.model)
    status_name = solver.StatusName(status)
    logger.debug("Crew assignment solved with status %s", status_name)

    if status not in (cp_model.OPTIMAL, cp_model.FEASIBLE):
        return AssignmentResult(status=status_name)

    assigned: Dict[str, List[str]] = {}
    for c_id, var in am.x.items():
        if solver.Value(var) == 1:
            assigned.setdefault(am.position_of[c_id], []).append(c_id)

    return AssignmentResult(
        status=status_name,
        objective=float(solver.ObjectiveValue()),
        assignments={k: sorted(v) for k, v in assigned.items()},
    )
