"""Build the initial tableau for a problem"""
import logging

import numpy as np

from .pivot import compute_derived_rows
from .problem import Direction, Relation
from .tableau import Tableau, VariableKind, variable_names

logger = logging.getLogger(__name__)


def maximize_objective(problem):
    """Objective as solved internally: always a maximization"""
    if problem.maximize:
        return problem.objective.copy()
    return -problem.objective


def build_standard(problem):
    """Single-phase tableau for a problem whose relations are all ≤"""
    m, n = problem.num_constraints, problem.num_vars

    decision_vars = variable_names(VariableKind.DECISION, n)
    slack_vars = variable_names(VariableKind.SLACK, m)

    # [A | I | b]
    rows = np.hstack([problem.constraints, np.eye(m), problem.rhs.reshape(-1, 1)])
    cj = np.concatenate([maximize_objective(problem), np.zeros(m)])

    tableau = Tableau(rows, decision_vars + slack_vars, cj, slack_vars)
    logger.info("Built single-phase tableau: %d constraints, %d variables", m, tableau.num_vars)
    return compute_derived_rows(tableau, Direction.MAXIMIZE)


def build_phase_one(problem):
    """Phase 1 tableau: slack / surplus / artificial columns, minimize the artificial sum"""
    m, n = problem.num_constraints, problem.num_vars

    # Count additional variables needed
    slack_count = problem.relations.count(Relation.LE)
    surplus_count = problem.relations.count(Relation.GE)
    artificial_count = surplus_count + problem.relations.count(Relation.EQ)

    slack_vars = variable_names(VariableKind.SLACK, slack_count)
    surplus_vars = variable_names(VariableKind.SURPLUS, surplus_count)
    artificial_vars = variable_names(VariableKind.ARTIFICIAL, artificial_count)
    all_vars = variable_names(VariableKind.DECISION, n) + slack_vars + surplus_vars + artificial_vars

    # Column offsets: decision, slacks, surpluses, artificials
    slack_col = n
    surplus_col = n + slack_count
    artificial_col = n + slack_count + surplus_count

    rows = np.zeros((m, len(all_vars) + 1))
    rows[:, :n] = problem.constraints
    rows[:, -1] = problem.rhs
    basis = []

    for i, relation in enumerate(problem.relations):
        if relation is Relation.LE:
            rows[i, slack_col] = 1
            basis.append(all_vars[slack_col])
            slack_col += 1
        elif relation is Relation.GE:
            rows[i, surplus_col] = -1
            rows[i, artificial_col] = 1
            basis.append(all_vars[artificial_col])
            surplus_col += 1
            artificial_col += 1
        else:
            rows[i, artificial_col] = 1
            basis.append(all_vars[artificial_col])
            artificial_col += 1

    cj = np.zeros(len(all_vars))
    cj[n + slack_count + surplus_count:] = 1

    tableau = Tableau(rows, all_vars, cj, basis)
    logger.info("Built Phase 1 tableau: %d constraints, %d slack, %d surplus, %d artificial",
                m, slack_count, surplus_count, artificial_count)
    return compute_derived_rows(tableau, Direction.MINIMIZE)


def build(problem):
    """Pick the single-phase or Phase 1 formulation"""
    if problem.needs_two_phase:
        return build_phase_one(problem)
    return build_standard(problem)
