"""Pivot selection and Gauss-Jordan elimination.

Both functions are pure: they return new data and never modify their
arguments, so a session can replay or reset without copying defensively.
"""
import logging
from collections import namedtuple

import numpy as np

from .config import PIVOT_TOL, ZERO_TOL
from .exceptions import PivotError
from .problem import Direction

logger = logging.getLogger(__name__)


class DerivedRows(namedtuple('DerivedRows', ['tableau', 'entering', 'leaving', 'entering_col', 'leaving_row'])):
    """Tableau with Zj / Cj-Zj filled in, plus the next pivot choice.

    ``entering`` is None when the tableau is optimal. ``leaving`` is None
    when optimal or when the ratio test found no row (unbounded).
    """

    @property
    def optimal(self):
        return self.entering is None

    @property
    def unbounded(self):
        return self.entering is not None and self.leaving is None


def _snap(values, tol):
    values[np.abs(values) < tol] = 0.0
    return values


def select_entering(cj_zj, sense):
    """Column index of the entering variable, or None if optimal.

    Ties go to the first column (np.argmax / np.argmin return the first
    occurrence).
    """
    if cj_zj.size == 0:
        return None
    if sense is Direction.MAXIMIZE:
        col = int(np.argmax(cj_zj))
        if cj_zj[col] <= ZERO_TOL:
            return None
    else:
        col = int(np.argmin(cj_zj))
        if cj_zj[col] >= -ZERO_TOL:
            return None
    return col


def ratio_test(rows, col):
    """Row index of the leaving variable, or None if the column is unbounded"""
    min_ratio = np.inf
    leaving_row = None
    for i in range(rows.shape[0]):
        coeff = rows[i, col]
        if coeff > ZERO_TOL:
            ratio = rows[i, -1] / coeff
            # A new row wins only if it is smaller by more than the tolerance
            if ratio >= -ZERO_TOL and ratio < min_ratio - ZERO_TOL:
                min_ratio = ratio
                leaving_row = i
    return leaving_row


def compute_derived_rows(tableau, sense=Direction.MAXIMIZE):
    """Fill Zj and Cj-Zj and pick the entering / leaving variables.

    ``sense`` is MAXIMIZE for single-phase and Phase 2 tables and MINIMIZE
    for the Phase 1 artificial sum.
    """
    result = tableau.copy()
    cb = result.basic_cj()

    # Zj[col] = sum over rows of CB * a[row, col], RHS column included
    zj = _snap(cb @ result.rows, ZERO_TOL)
    cj_zj = np.zeros_like(zj)
    cj_zj[:-1] = result.cj - zj[:-1]
    cj_zj = _snap(cj_zj, ZERO_TOL)

    result.zj = zj
    result.cj_zj = cj_zj

    entering_col = select_entering(cj_zj[:-1], sense)
    if entering_col is None:
        return DerivedRows(result, None, None, None, None)

    leaving_row = ratio_test(result.rows, entering_col)
    entering = result.variables[entering_col]
    leaving = None if leaving_row is None else result.basis[leaving_row]
    return DerivedRows(result, entering, leaving, entering_col, leaving_row)


def pivot(rows, pivot_row, pivot_col):
    """Gauss-Jordan pivot on the constraint rows; returns a new array"""
    table = np.array(rows, dtype=float)
    pivot_value = table[pivot_row, pivot_col]

    if abs(pivot_value) < PIVOT_TOL:
        raise PivotError("Pivot value is too close to zero.")

    # Normalize pivot row
    table[pivot_row, :] = _snap(table[pivot_row, :] / pivot_value, PIVOT_TOL)

    # Eliminate the pivot column from the other rows
    for i in range(table.shape[0]):
        if i == pivot_row:
            continue
        factor = table[i, pivot_col]
        if abs(factor) < PIVOT_TOL:
            continue
        table[i, :] = _snap(table[i, :] - factor * table[pivot_row, :], PIVOT_TOL)

    logger.debug("Pivot on row %d, column %d (element %.6g)", pivot_row, pivot_col, pivot_value)
    return table


def pivot_tableau(tableau, pivot_row, pivot_col):
    """Pivot a Tableau and swap the entering variable into the basis.

    Zj and Cj-Zj of the result are stale until ``compute_derived_rows`` runs.
    """
    result = tableau.copy()
    result.rows = pivot(tableau.rows, pivot_row, pivot_col)
    result.basis[pivot_row] = result.variables[pivot_col]
    return result


def alternative_optima(tableau):
    """Non-basic variables with zero reduced cost on an optimal tableau"""
    return [name for j, name in enumerate(tableau.variables)
            if name not in tableau.basis and abs(tableau.cj_zj[j]) < ZERO_TOL]
