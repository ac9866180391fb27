"""Human-readable rendering of numbers and equations (display only)"""
import math
from fractions import Fraction

from .config import FRACTION_MAX_TERM, ZERO_TOL
from .tableau import VariableKind, variable_kind


def to_fraction(value):
    """Render a float as an integer, ``p/q`` or a short decimal.

    Values within 1e-10 of an integer are shown as that integer. Fractions
    whose numerator or denominator would exceed 10000 fall back to a
    6-digit decimal.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "∞" if value > 0 else "-∞"
    if abs(value) < ZERO_TOL:
        return "0"

    sign = "-" if value < 0 else ""
    magnitude = abs(value)

    if abs(magnitude - round(magnitude)) < ZERO_TOL:
        return f"{sign}{round(magnitude)}"

    frac = Fraction(magnitude).limit_denominator(FRACTION_MAX_TERM)
    if (abs(magnitude - float(frac)) > magnitude * ZERO_TOL
            or frac.numerator > FRACTION_MAX_TERM):
        return _short_decimal(value)

    if frac.denominator == 1:
        return f"{sign}{frac.numerator}"
    return f"{sign}{frac.numerator}/{frac.denominator}"


def _short_decimal(value):
    text = f"{value:.6f}".rstrip('0').rstrip('.')
    return "0" if text in ("", "-0") else text


def linear_expression(coeffs, names):
    """``3x1 - x2 + 1/2s1``; zero terms are skipped and an empty sum reads 0"""
    terms = []
    for coeff, name in zip(coeffs, names):
        if abs(coeff) < ZERO_TOL:
            continue
        sign = "+" if coeff >= 0 else "-"
        magnitude = abs(coeff)
        coeff_str = "" if magnitude == 1 else to_fraction(magnitude)
        terms.append(f"{sign} {coeff_str}{name}")

    expression = " ".join(terms)
    if expression.startswith("+ "):
        expression = expression[2:]
    return expression or "0"


def _constraint_lines(problem):
    names = [f'x{j+1}' for j in range(problem.num_vars)]
    return [f"{linear_expression(row, names)} {relation.value} {to_fraction(rhs)}"
            for row, relation, rhs in zip(problem.constraints, problem.relations, problem.rhs)]


def _non_negativity(variables):
    return [f"{name} ≥ 0" for name in variables]


def format_equations(problem):
    """Objective, constraints and non-negativity lines for the original problem"""
    names = [f'x{j+1}' for j in range(problem.num_vars)]
    objective = f"{problem.direction.value} Z = {linear_expression(problem.objective, names)}"
    return [objective] + _constraint_lines(problem) + _non_negativity(names)


def format_phase_one_equations(problem, tableau):
    """Phase 1 view: minimize the artificial sum over the augmented variables"""
    objective = f"Minimize W = {linear_expression(tableau.cj, tableau.variables)}"
    return [objective] + _constraint_lines(problem) + _non_negativity(tableau.variables)


def format_phase_two_equations(problem, tableau):
    """Phase 2 view: the original objective over the remaining variables"""
    decision = [(name, problem.objective[int(name[1:]) - 1])
                for name in tableau.variables
                if variable_kind(name) is VariableKind.DECISION]
    expression = linear_expression([c for _, c in decision], [name for name, _ in decision])
    return ([f"{problem.direction.value} Z = {expression}",
             "Subject to: Constraints from Phase I (artificial variables removed)"]
            + _non_negativity(tableau.variables))
