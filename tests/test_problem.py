import numpy as np
import pytest

from simplex_tableau import Direction, Problem, Relation


def test_relation_parse_accepts_ascii_and_unicode():
    assert Relation.parse("<=") is Relation.LE
    assert Relation.parse("≤") is Relation.LE
    assert Relation.parse(">=") is Relation.GE
    assert Relation.parse("≥") is Relation.GE
    assert Relation.parse("=") is Relation.EQ
    assert Relation.parse(Relation.EQ) is Relation.EQ

    with pytest.raises(ValueError):
        Relation.parse("<")


def test_defaults_to_less_equal_and_single_phase(textbook_max):
    assert textbook_max.relations == (Relation.LE, Relation.LE, Relation.LE)
    assert not textbook_max.needs_two_phase
    assert textbook_max.maximize
    assert textbook_max.num_vars == 2
    assert textbook_max.num_constraints == 3


def test_two_phase_routing(equality_min, infeasible):
    assert equality_min.needs_two_phase
    assert infeasible.needs_two_phase
    assert not equality_min.maximize


def test_direction_from_string():
    problem = Problem([1], [[1]], [1], "minimize")
    assert problem.direction is Direction.MINIMIZE


@pytest.mark.parametrize("objective, constraints, rhs, relations", [
    ([], [[1]], [1], None),
    ([1, 2], [[1]], [1], None),
    ([1], [[1], [2]], [1], None),
    ([1], [[1]], [1], ["<=", ">="]),
])
def test_shape_errors(objective, constraints, rhs, relations):
    with pytest.raises(ValueError):
        Problem(objective, constraints, rhs, Direction.MAXIMIZE, relations)


def test_problem_is_read_only(textbook_max):
    with pytest.raises(ValueError):
        textbook_max.objective[0] = 10


def test_normalized_flips_negative_rhs():
    problem = Problem([1, 1], [[1, -2], [-1, 1]], [-3, 4], Direction.MAXIMIZE, ["<=", "="])
    normalized = problem.normalized()

    np.testing.assert_array_equal(normalized.rhs, [3, 4])
    np.testing.assert_array_equal(normalized.constraints, [[-1, 2], [-1, 1]])
    assert normalized.relations == (Relation.GE, Relation.EQ)
    assert normalized.needs_two_phase
    # original untouched
    np.testing.assert_array_equal(problem.rhs, [-3, 4])
