import copy
from enum import Enum

import numpy as np
import pandas as pd


class VariableKind(Enum):
    DECISION = 'x'
    SLACK = 's'
    SURPLUS = 'e'
    ARTIFICIAL = 'a'


def variable_names(kind, count):
    """Names ``x1..xn`` / ``s1..sn`` / ... for one namespace"""
    return [f'{kind.value}{i+1}' for i in range(count)]


def variable_kind(name):
    """Role of a variable, read from its namespace prefix"""
    return VariableKind(name[0])


def is_artificial(name):
    return variable_kind(name) is VariableKind.ARTIFICIAL


class Tableau:
    """Constraint rows plus the derived Zj and Cj-Zj rows.

    ``rows`` holds one row per constraint: the coefficients over every
    variable followed by the right-hand side. ``zj`` and ``cj_zj`` have the
    same width; they are filled by ``pivot.compute_derived_rows`` and are
    zero on a freshly built tableau.
    """

    def __init__(self, rows, variables, cj, basis, zj=None, cj_zj=None):
        self.rows = np.array(rows, dtype=float)
        self.variables = list(variables)
        self.cj = np.array(cj, dtype=float)
        self.basis = list(basis)

        width = len(self.variables) + 1
        if self.rows.ndim != 2 or self.rows.shape[1] != width:
            raise ValueError(f"Tableau rows must have {width} columns (variables + RHS)")
        if self.cj.shape != (len(self.variables),):
            raise ValueError("Cj must have one entry per variable")
        if len(self.basis) != self.rows.shape[0]:
            raise ValueError("Basis must name one variable per constraint row")

        self.zj = np.zeros(width) if zj is None else np.array(zj, dtype=float)
        self.cj_zj = np.zeros(width) if cj_zj is None else np.array(cj_zj, dtype=float)

    @property
    def num_rows(self):
        return self.rows.shape[0]

    @property
    def num_vars(self):
        return len(self.variables)

    @property
    def rhs(self):
        return self.rows[:, -1]

    @property
    def table(self):
        """Full table: constraint rows, then Zj, then Cj-Zj"""
        return np.vstack([self.rows, self.zj, self.cj_zj])

    @property
    def objective_value(self):
        """Zj under the RHS column, i.e. the objective at the current vertex"""
        return self.zj[-1]

    def index(self, name):
        return self.variables.index(name)

    def basic_cj(self):
        """Cj of the basic variable in each row (CB column)"""
        return np.array([self.cj[self.index(b)] for b in self.basis], dtype=float)

    def values(self):
        """Value of every variable at the current basic solution"""
        values = dict.fromkeys(self.variables, 0.0)
        for i, name in enumerate(self.basis):
            values[name] = float(self.rhs[i])
        return values

    def copy(self):
        return copy.deepcopy(self)

    def to_frame(self):
        """Tableau as a DataFrame, labelled by basis and variable names"""
        columns = self.variables + ['RHS']
        index = self.basis + ['Zj', 'Cj-Zj']
        df = pd.DataFrame(self.table, columns=columns, index=index)
        df.index.name = 'Basic Var'
        df.insert(0, 'CB', list(self.basic_cj()) + [np.nan, np.nan])
        return df

    def __repr__(self):
        return f"Tableau(rows={self.num_rows}, variables={self.variables}, basis={self.basis})"
