"""Two-Phase orchestration: Phase 1 feasibility, handoff, Phase 2 optimization"""
import logging
from enum import Enum

import numpy as np

from . import config
from .exceptions import PhaseError
from .formatting import format_equations, format_phase_one_equations, format_phase_two_equations
from .formulation import build_phase_one, build_standard, maximize_objective
from .pivot import alternative_optima, compute_derived_rows, pivot_tableau
from .problem import Direction
from .session import Phase, SimplexSession, Status
from .tableau import Tableau, VariableKind, is_artificial, variable_kind

logger = logging.getLogger(__name__)


class PhaseState(Enum):
    RUNNING = "running"
    OPTIMAL = "optimal"
    PHASE1_RUNNING = "phase 1 running"
    PHASE1_OPTIMAL = "phase 1 optimal"
    PHASE2_RUNNING = "phase 2 running"
    PHASE2_OPTIMAL = "phase 2 optimal"
    INFEASIBLE = "infeasible"
    UNBOUNDED = "unbounded"
    STOPPED = "stopped"


_RUNNING = {Phase.SINGLE: PhaseState.RUNNING, Phase.ONE: PhaseState.PHASE1_RUNNING, Phase.TWO: PhaseState.PHASE2_RUNNING}
_OPTIMAL = {Phase.SINGLE: PhaseState.OPTIMAL, Phase.ONE: PhaseState.PHASE1_OPTIMAL, Phase.TWO: PhaseState.PHASE2_OPTIMAL}


def _rebase_artificial_rows(tableau):
    """Pivot basic artificial variables out before their columns are dropped.

    A feasible Phase 1 optimum can keep an artificial variable basic at zero
    level. Pivoting in the first non-artificial column with a non-zero entry
    in that row keeps the RHS unchanged (it is zero). A row with no such
    column is a redundant constraint and is removed.
    """
    redundant = []
    for i in range(tableau.num_rows):
        if not is_artificial(tableau.basis[i]):
            continue
        candidates = [j for j, name in enumerate(tableau.variables)
                      if not is_artificial(name) and abs(tableau.rows[i, j]) > config.ZERO_TOL]
        if candidates:
            logger.warning("Artificial %s still basic in row %d; pivoting in %s",
                           tableau.basis[i], i + 1, tableau.variables[candidates[0]])
            tableau = pivot_tableau(tableau, i, candidates[0])
        else:
            logger.warning("Row %d is redundant; removing it from Phase 2", i + 1)
            redundant.append(i)

    if redundant:
        keep = [i for i in range(tableau.num_rows) if i not in redundant]
        tableau = Tableau(tableau.rows[keep], tableau.variables, tableau.cj,
                          [tableau.basis[i] for i in keep])
    return tableau


def build_phase_two(phase_one_tableau, problem):
    """Drop artificial columns and restore the original objective"""
    tableau = _rebase_artificial_rows(phase_one_tableau.copy())

    keep_cols = [j for j, name in enumerate(tableau.variables) if not is_artificial(name)]
    variables = [tableau.variables[j] for j in keep_cols]
    rows = tableau.rows[:, keep_cols + [tableau.num_vars]]

    # Decision variables get the (maximize-form) objective, slack / surplus get 0
    objective = maximize_objective(problem)
    cj = np.zeros(len(variables))
    for j, name in enumerate(variables):
        if variable_kind(name) is VariableKind.DECISION:
            cj[j] = objective[int(name[1:]) - 1]

    logger.info("Phase 2 tableau: %d constraints, %d variables", len(rows), len(variables))
    return compute_derived_rows(Tableau(rows, variables, cj, tableau.basis), Direction.MAXIMIZE)


class Solution:
    """Outcome of a solve, in the user's optimization direction"""

    def __init__(self, status, message, values, objective_value, alternative_optima=(), iterations=0):
        self.status = status
        self.message = message
        self.values = values
        self.objective_value = objective_value
        self.alternative_optima = list(alternative_optima)
        self.iterations = iterations

    @property
    def optimal(self):
        return self.status is Status.OPTIMAL

    def __repr__(self):
        return f"Solution({self.status.value}, Z={self.objective_value}, {self.values})"


class PhaseController:
    """Runs a problem through single-phase or Phase 1 -> Phase 2 sessions"""

    def __init__(self, problem):
        # Non-negative RHS keeps the starting slack / artificial basis feasible
        self.problem = problem = problem.normalized()
        self.phase_one = None
        self.phase_two = None

        if problem.needs_two_phase:
            tableau = build_phase_one(problem).tableau
            self.phase_one = SimplexSession(tableau, Phase.ONE)
            self.session = self.phase_one
            self.equations = format_phase_one_equations(problem, tableau)
        else:
            self.session = SimplexSession(build_standard(problem).tableau, Phase.SINGLE)
            self.equations = format_equations(problem)

    @property
    def two_phase(self):
        return self.phase_one is not None

    @property
    def state(self):
        status = self.session.status
        if status is Status.ITERATING:
            return _RUNNING[self.session.phase]
        if status is Status.OPTIMAL:
            return _OPTIMAL[self.session.phase]
        if status is Status.INFEASIBLE:
            return PhaseState.INFEASIBLE
        if status is Status.UNBOUNDED:
            return PhaseState.UNBOUNDED
        return PhaseState.STOPPED

    @property
    def finished(self):
        return self.state in (PhaseState.OPTIMAL, PhaseState.PHASE2_OPTIMAL,
                              PhaseState.INFEASIBLE, PhaseState.UNBOUNDED)

    def step(self):
        return self.session.step()

    def reset(self):
        """Reset the current phase to its initial tableau"""
        return self.session.reset()

    def advance(self):
        """Hand a feasible Phase 1 optimum over to Phase 2"""
        if self.state is not PhaseState.PHASE1_OPTIMAL:
            raise PhaseError(f"Cannot start Phase 2 from state {self.state.value!r}")

        tableau = build_phase_two(self.phase_one.tableau, self.problem).tableau
        self.phase_two = SimplexSession(tableau, Phase.TWO)
        self.session = self.phase_two
        self.equations = format_phase_two_equations(self.problem, tableau)
        logger.info("Phase 1 feasible; starting Phase 2")
        return self.session.snapshot()

    def solve_to_optimal(self, max_iterations=config.MAX_AUTO_ITERATIONS):
        """Solve every remaining phase; the iteration cap applies per phase"""
        snap = self.session.solve_to_optimal(max_iterations)
        if self.state is PhaseState.PHASE1_OPTIMAL:
            self.advance()
            snap = self.session.solve_to_optimal(max_iterations)
        return snap

    @property
    def history(self):
        """Snapshots of every phase run so far"""
        sessions = [s for s in (self.phase_one, self.phase_two) if s is not None] or [self.session]
        return [snap for s in sessions for snap in s.history]

    def solution(self):
        session = self.session
        iterations = len(self.history) - (2 if self.phase_two is not None else 1)

        if session.phase is Phase.ONE or session.status is not Status.OPTIMAL:
            return Solution(session.status, session.message, None, None, iterations=iterations)

        values = session.values()
        decision = {name: values[name] for name in session.tableau.variables
                    if variable_kind(name) is VariableKind.DECISION}
        internal = session.tableau.objective_value
        objective_value = internal if self.problem.maximize else -internal
        return Solution(session.status, session.message, decision, float(objective_value) + 0.0,
                        alternative_optima(session.tableau), iterations)


def solve(problem, max_iterations=config.MAX_AUTO_ITERATIONS):
    """Solve a problem start to finish and return its Solution"""
    controller = PhaseController(problem)
    controller.solve_to_optimal(max_iterations)
    return controller.solution()
