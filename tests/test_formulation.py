import numpy as np

from simplex_tableau import Direction, Problem, build, build_phase_one, build_standard


def test_standard_form_layout(textbook_max):
    tableau = build_standard(textbook_max).tableau

    assert tableau.variables == ['x1', 'x2', 's1', 's2', 's3']
    assert tableau.basis == ['s1', 's2', 's3']
    np.testing.assert_array_equal(tableau.cj, [3, 5, 0, 0, 0])
    np.testing.assert_array_equal(tableau.rows, [
        [1, 0, 1, 0, 0, 4],
        [0, 2, 0, 1, 0, 12],
        [3, 2, 0, 0, 1, 18],
    ])
    # constraints + Zj + Cj-Zj, every row variables + RHS wide
    assert tableau.table.shape == (5, 6)


def test_standard_form_negates_minimize_objective():
    problem = Problem([2, -1], [[1, 1]], [5], Direction.MINIMIZE)
    tableau = build_standard(problem).tableau
    np.testing.assert_array_equal(tableau.cj, [-2, 1, 0])


def test_phase_one_column_order_and_basis():
    problem = Problem([1, 2], [[1, 1], [2, 1], [1, 3]], [4, 2, 3], Direction.MAXIMIZE, ["<=", ">=", "="])
    derived = build_phase_one(problem)
    tableau = derived.tableau

    assert tableau.variables == ['x1', 'x2', 's1', 'e1', 'a1', 'a2']
    assert tableau.basis == ['s1', 'a1', 'a2']
    np.testing.assert_array_equal(tableau.cj, [0, 0, 0, 0, 1, 1])
    np.testing.assert_array_equal(tableau.rows, [
        [1, 1, 1, 0, 0, 0, 4],
        [2, 1, 0, -1, 1, 0, 2],
        [1, 3, 0, 0, 0, 1, 3],
    ])
    # W = a1 + a2 = 5 at the starting vertex
    assert tableau.objective_value == 5
    np.testing.assert_array_equal(tableau.cj_zj[:-1], [-3, -4, 0, 1, 0, 0])
    assert derived.entering == 'x2'
    assert derived.leaving == 'a2'


def test_phase_one_ignores_direction(equality_min):
    maximized = Problem(equality_min.objective, equality_min.constraints, equality_min.rhs,
                        Direction.MAXIMIZE, equality_min.relations)
    np.testing.assert_array_equal(build_phase_one(equality_min).tableau.cj,
                                  build_phase_one(maximized).tableau.cj)


def test_build_routes_on_relations(textbook_max, equality_min):
    assert build(textbook_max).tableau.basis == ['s1', 's2', 's3']
    assert build(equality_min).tableau.basis == ['a1', 'a2']
