from enum import Enum

import numpy as np


class Direction(Enum):
    MAXIMIZE = "Maximize"
    MINIMIZE = "Minimize"


class Relation(Enum):
    LE = "≤"
    GE = "≥"
    EQ = "="

    @classmethod
    def parse(cls, value):
        """Accept a Relation or one of its ASCII / unicode spellings"""
        if isinstance(value, cls):
            return value
        aliases = {
            '<=': cls.LE, '≤': cls.LE,
            '>=': cls.GE, '≥': cls.GE,
            '=': cls.EQ, '==': cls.EQ,
        }
        try:
            return aliases[str(value).strip()]
        except KeyError:
            raise ValueError(f"Unknown constraint relation: {value!r}") from None

    @property
    def flipped(self):
        if self is Relation.LE:
            return Relation.GE
        if self is Relation.GE:
            return Relation.LE
        return self


class Problem:
    """A linear program as entered by the user.

    ``objective`` has one coefficient per decision variable, ``constraints``
    is the m x n coefficient matrix, ``rhs`` the m right-hand sides and
    ``relations`` the per-row relational operator. Shapes are checked here,
    at the input boundary, so the engine can assume well-formed data.
    """

    def __init__(self, objective, constraints, rhs, direction=Direction.MAXIMIZE, relations=None):
        if isinstance(direction, str):
            direction = Direction(direction.capitalize())
        self.direction = direction

        self.objective = np.array(objective, dtype=float)
        self.constraints = np.array(constraints, dtype=float)
        self.rhs = np.array(rhs, dtype=float)

        if self.objective.ndim != 1 or self.objective.size == 0:
            raise ValueError("Objective function must have at least one coefficient.")
        if self.constraints.ndim != 2 or self.constraints.shape[0] == 0:
            raise ValueError("Constraint matrix must be two-dimensional with at least one row.")
        if self.constraints.shape[1] != self.objective.size:
            raise ValueError("Every constraint row must have one coefficient per decision variable.")
        if self.rhs.ndim != 1 or self.rhs.size != self.constraints.shape[0]:
            raise ValueError("Number of right-hand sides must equal the number of constraints.")

        if relations is None:
            relations = [Relation.LE] * self.num_constraints
        self.relations = tuple(Relation.parse(r) for r in relations)
        if len(self.relations) != self.num_constraints:
            raise ValueError("Number of relations must equal the number of constraints.")

        for arr in (self.objective, self.constraints, self.rhs):
            arr.setflags(write=False)

    @property
    def num_vars(self):
        return self.objective.size

    @property
    def num_constraints(self):
        return self.rhs.size

    @property
    def maximize(self):
        return self.direction is Direction.MAXIMIZE

    @property
    def needs_two_phase(self):
        """True unless every relation is ≤"""
        return any(r is not Relation.LE for r in self.relations)

    def normalized(self):
        """Return an equivalent problem whose right-hand sides are all non-negative"""
        constraints = self.constraints.copy()
        rhs = self.rhs.copy()
        relations = list(self.relations)

        # Multiply rows with negative RHS by -1 and flip the relation
        for i in range(self.num_constraints):
            if rhs[i] < 0:
                rhs[i] = -rhs[i]
                constraints[i] = -constraints[i]
                relations[i] = relations[i].flipped

        return Problem(self.objective, constraints, rhs, self.direction, relations)

    def __repr__(self):
        return (f"Problem({self.direction.value}, vars={self.num_vars}, "
                f"constraints={self.num_constraints})")
