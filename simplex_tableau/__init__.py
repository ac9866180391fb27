"""Tableau simplex solver with the Two-Phase method"""
from .exceptions import PhaseError, PivotError, SimplexError
from .formulation import build, build_phase_one, build_standard
from .phases import PhaseController, PhaseState, Solution, build_phase_two, solve
from .pivot import DerivedRows, compute_derived_rows, pivot
from .problem import Direction, Problem, Relation
from .session import Phase, SimplexSession, Snapshot, Status
from .tableau import Tableau

__version__ = "0.1.0"

__all__ = [
    "Direction", "Problem", "Relation", "Tableau",
    "DerivedRows", "compute_derived_rows", "pivot",
    "build", "build_standard", "build_phase_one", "build_phase_two",
    "Phase", "SimplexSession", "Snapshot", "Status",
    "PhaseController", "PhaseState", "Solution", "solve",
    "SimplexError", "PivotError", "PhaseError",
]
