from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence

from ortools.sat.python import cp_model

from crew_qualification.domain.processed import ProcessedCrewMember
from crew_qualification.eligibility.pipeline import INTERNAL_LABEL
from crew_qualification.preprocessing.coverage_check import is_assignable


@dataclass(frozen=True)
class AssignmentModel:
    model: cp_model.CpModel
    x: Dict[str, cp_model.IntVar]  # crew_id -> var
    position_of: Dict[str, str]    # crew_id -> position


def assignment_cost(p: ProcessedCrewMember, weights: Dict[str, int]) -> int:
    docs_w = int(weights.get("missing_document", 10))
    freelancer_w = int(weights.get("freelancer", 1))
    is_freelancer = p.role_label != INTERNAL_LABEL
    return docs_w * len(p.missing_documents) + (freelancer_w if is_freelancer else 0)


def build_assignment_model(
        processed: Sequence[ProcessedCrewMember],
        coverage: Dict[str, int],
        weights: Dict[str, int],
) -> AssignmentModel:
    """
    Build a CP-SAT model that picks a crew for one aircraft.

    Variables:
      x[c] = 1 if crew member c is picked for their position

    Constraints:
      - Coverage: for each position, pick exactly coverage[position] members
      - Only assignable members (qualified, account not inactive) get a variable

    Objective:
      minimize missing documents and freelancer use of the picked crew
    """
    model = cp_model.CpModel()

    x: Dict[str, cp_model.IntVar] = {}
    position_of: Dict[str, str] = {}
    for p in processed:
        if p.position in coverage and is_assignable(p):
            x[p.crew_id] = model.NewBoolVar(f"x[{p.crew_id}]")
            position_of[p.crew_id] = p.position

    # --- Coverage constraints: one per required position ---
    for position, required_n in coverage.items():
        vars_for_position = [v for c_id, v in x.items() if position_of[c_id] == position]
        if vars_for_position:
            model.Add(sum(vars_for_position) == int(required_n))
        else:
            # Nobody can fill it: only feasible when nothing is required
            model.Add(model.NewConstant(0) == int(required_n))

    # --- Objective ---
    by_id = {p.crew_id: p for p in processed}
    terms: List[cp_model.LinearExpr] = [
        assignment_cost(by_id[c_id], weights) * var for c_id, var in x.items()
    ]
    if terms:
        model.Minimize(sum(terms))

    return AssignmentModel(model=model, x=x, position_of=position_of)
