"""Step-by-step driver around the pivot engine"""
import logging
from collections import namedtuple
from enum import Enum

from . import config
from .exceptions import PivotError
from .pivot import compute_derived_rows, pivot_tableau
from .problem import Direction

logger = logging.getLogger(__name__)


class Phase(Enum):
    SINGLE = "Simplex"
    ONE = "Phase 1"
    TWO = "Phase 2"

    @property
    def sense(self):
        """Phase 1 minimizes the artificial sum; everything else maximizes"""
        return Direction.MINIMIZE if self is Phase.ONE else Direction.MAXIMIZE

    @property
    def optimal_message(self):
        return {
            Phase.SINGLE: config.MSG_OPTIMAL,
            Phase.ONE: config.MSG_PHASE1_FEASIBLE,
            Phase.TWO: config.MSG_PHASE2_OPTIMAL,
        }[self]

    @property
    def unbounded_message(self):
        return {
            Phase.SINGLE: config.MSG_UNBOUNDED,
            Phase.ONE: config.MSG_PHASE1_UNBOUNDED,
            Phase.TWO: config.MSG_PHASE2_UNBOUNDED,
        }[self]


class Status(Enum):
    ITERATING = "iterating"
    OPTIMAL = "optimal"
    UNBOUNDED = "unbounded"
    INFEASIBLE = "infeasible"
    PIVOT_ERROR = "pivot error"
    ITERATION_LIMIT = "iteration limit"


TERMINAL = frozenset({Status.OPTIMAL, Status.UNBOUNDED, Status.INFEASIBLE})


class Snapshot(namedtuple('Snapshot', ['phase', 'tableau', 'entering', 'leaving', 'iteration', 'status', 'message'])):
    """State handed to the presentation layer after each step"""

    @property
    def table(self):
        return self.tableau.table

    @property
    def variables(self):
        return self.tableau.variables

    @property
    def cj(self):
        return self.tableau.cj

    @property
    def basis(self):
        return self.tableau.basis

    def to_frame(self):
        return self.tableau.to_frame()


class SimplexSession:
    """Current tableau of one phase, with single-step, auto-solve and reset.

    The tableau passed in is saved as the reset point. ``history`` holds one
    snapshot for the initial tableau and one per completed pivot; a step that
    only reports a status (optimal, unbounded, pivot error) updates the last
    entry instead of adding one.
    """

    def __init__(self, tableau, phase=Phase.SINGLE):
        self.phase = phase
        derived = compute_derived_rows(tableau, phase.sense)
        self._initial = derived.tableau.copy()
        self._restore(derived)

    def _restore(self, derived):
        self.tableau = derived.tableau
        self.entering = derived.entering
        self.leaving = derived.leaving
        self.iteration = 1
        self.status = Status.ITERATING
        self.message = None
        self.history = [self.snapshot()]

    @property
    def finished(self):
        return self.status in TERMINAL

    def snapshot(self):
        return Snapshot(self.phase, self.tableau.copy(), self.entering, self.leaving,
                        self.iteration, self.status, self.message)

    def _restamp(self):
        """Status changed without a pivot: refresh the last history entry"""
        snap = self.snapshot()
        self.history[-1] = snap
        return snap

    def _report_optimal(self):
        self.entering = None
        self.leaving = None
        if self.phase is Phase.ONE and abs(self.tableau.objective_value) >= config.ZERO_TOL:
            self.status = Status.INFEASIBLE
            self.message = config.MSG_PHASE1_INFEASIBLE
            logger.info("Phase 1 optimal with W = %.6g: infeasible", self.tableau.objective_value)
        else:
            self.status = Status.OPTIMAL
            self.message = self.phase.optimal_message
            logger.info("%s optimal after %d iterations (Z = %.6g)",
                        self.phase.value, self.iteration, self.tableau.objective_value)

    def step(self, automatic=False):
        """Perform one pivot, or report why none is possible"""
        derived = compute_derived_rows(self.tableau, self.phase.sense)
        self.tableau = derived.tableau

        # Check optimality
        if derived.optimal:
            self._report_optimal()
            return self._restamp()

        # Check for unboundedness
        if derived.unbounded:
            self.entering = derived.entering
            self.leaving = None
            self.status = Status.UNBOUNDED
            self.message = self.phase.unbounded_message
            logger.info("%s unbounded: %s has no leaving variable", self.phase.value, derived.entering)
            return self._restamp()

        try:
            pivoted = pivot_tableau(derived.tableau, derived.leaving_row, derived.entering_col)
        except PivotError as exc:
            # Keep the pre-pivot tableau
            template = config.MSG_AUTO_PIVOT_ERROR if automatic else config.MSG_PIVOT_ERROR
            self.status = Status.PIVOT_ERROR
            self.message = template.format(exc)
            logger.warning("%s: %s", self.phase.value, self.message)
            return self._restamp()

        logger.debug("%s iteration %d: %s enters, %s leaves",
                     self.phase.value, self.iteration, derived.entering, derived.leaving)

        after = compute_derived_rows(pivoted, self.phase.sense)
        self.tableau = after.tableau
        self.iteration += 1

        if after.optimal:
            self._report_optimal()
        else:
            self.entering = after.entering
            self.leaving = after.leaving
            self.status = Status.ITERATING
            self.message = None

        snap = self.snapshot()
        self.history.append(snap)
        return snap

    def iter_steps(self, max_iterations=config.MAX_AUTO_ITERATIONS):
        """Yield a snapshot per step until a terminal status or the iteration cap.

        Stopping the generator early leaves the session at the last step.
        """
        for _ in range(max_iterations):
            snap = self.step(automatic=True)
            yield snap
            if snap.status is not Status.ITERATING:
                return

        self.status = Status.ITERATION_LIMIT
        self.message = config.MSG_ITERATION_LIMIT
        self._restamp()
        logger.warning("%s stopped after %d automatic iterations", self.phase.value, max_iterations)

    def solve_to_optimal(self, max_iterations=config.MAX_AUTO_ITERATIONS):
        """Step until optimal, unbounded, infeasible, a pivot error or the cap"""
        for _ in self.iter_steps(max_iterations):
            pass
        return self.snapshot()

    def reset(self):
        """Back to the initial tableau, discarding pivot history"""
        self._restore(compute_derived_rows(self._initial, self.phase.sense))
        return self.snapshot()

    def values(self):
        return self.tableau.values()
