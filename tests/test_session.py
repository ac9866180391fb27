import numpy as np
import pytest

from simplex_tableau import Phase, PivotError, SimplexSession, Status, build_phase_one, build_standard
from simplex_tableau import config


def assert_identity_basis(tableau):
    for i, name in enumerate(tableau.basis):
        expected = np.zeros(tableau.num_rows)
        expected[i] = 1
        np.testing.assert_allclose(tableau.rows[:, tableau.index(name)], expected, atol=1e-9)


@pytest.fixture
def session(textbook_max):
    return SimplexSession(build_standard(textbook_max).tableau, Phase.SINGLE)


def test_initial_state(session):
    assert session.iteration == 1
    assert session.status is Status.ITERATING
    assert session.message is None
    assert session.entering == 'x2'
    assert session.leaving == 's2'
    assert len(session.history) == 1


def test_single_steps_to_optimum(session):
    snap = session.step()
    assert snap.iteration == 2
    assert snap.basis == ['s1', 'x2', 's3']
    assert (snap.entering, snap.leaving) == ('x1', 's3')
    assert snap.message is None

    snap = session.step()
    assert snap.iteration == 3
    assert snap.status is Status.OPTIMAL
    assert snap.message == "Optimal solution reached."
    assert snap.entering is None and snap.leaving is None
    assert snap.tableau.objective_value == pytest.approx(36)

    values = session.values()
    assert values['x1'] == pytest.approx(2)
    assert values['x2'] == pytest.approx(6)


def test_entering_column_is_identity_after_every_pivot(session):
    session.solve_to_optimal()
    for snap in session.history:
        assert_identity_basis(snap.tableau)


def test_step_at_optimum_does_not_mutate(session):
    session.solve_to_optimal()
    before = session.tableau.table.copy()
    iteration = session.iteration

    snap = session.step()

    np.testing.assert_array_equal(snap.table, before)
    assert snap.iteration == iteration
    assert snap.message == config.MSG_OPTIMAL
    assert len(session.history) == 3


def test_reset_then_replay_is_deterministic(session):
    first = [session.step().table for _ in range(2)]

    snap = session.reset()
    assert snap.iteration == 1
    assert snap.message is None
    assert len(session.history) == 1
    assert (snap.entering, snap.leaving) == ('x2', 's2')

    second = [session.step().table for _ in range(2)]
    for a, b in zip(first, second):
        np.testing.assert_array_equal(a, b)


def test_stepping_and_auto_solve_agree(textbook_max):
    stepped = SimplexSession(build_standard(textbook_max).tableau)
    while stepped.status is Status.ITERATING:
        stepped.step()

    auto = SimplexSession(build_standard(textbook_max).tableau)
    auto.solve_to_optimal()

    np.testing.assert_array_equal(stepped.tableau.table, auto.tableau.table)
    assert stepped.iteration == auto.iteration


def test_unbounded_reports_entering_without_leaving(unbounded):
    session = SimplexSession(build_standard(unbounded).tableau)
    snap = session.solve_to_optimal()

    assert snap.status is Status.UNBOUNDED
    assert snap.entering == 'x2'
    assert snap.leaving is None
    assert snap.message == "Problem is unbounded (no valid leaving variable)."


def test_iteration_limit_is_not_optimal(session):
    snap = session.solve_to_optimal(max_iterations=1)

    assert snap.status is Status.ITERATION_LIMIT
    assert snap.message == "Stopped: reached maximum automatic iterations limit."
    assert snap.iteration == 2
    assert session.history[-1].status is Status.ITERATION_LIMIT

    # can still be finished afterwards
    assert session.solve_to_optimal().status is Status.OPTIMAL


def test_iter_steps_can_stop_between_steps(session):
    steps = session.iter_steps()
    first = next(steps)
    steps.close()

    assert first.iteration == 2
    assert session.status is Status.ITERATING


def test_pivot_error_keeps_pre_pivot_tableau(session, monkeypatch):
    def failing_pivot(*args):
        raise PivotError("Pivot value is too close to zero.")

    monkeypatch.setattr("simplex_tableau.session.pivot_tableau", failing_pivot)
    before = session.tableau.table.copy()

    snap = session.step()
    assert snap.status is Status.PIVOT_ERROR
    assert snap.message == "Error during pivot: Pivot value is too close to zero."
    np.testing.assert_array_equal(session.tableau.table, before)
    assert session.iteration == 1

    snap = session.solve_to_optimal()
    assert snap.message == "Error during automatic pivot: Pivot value is too close to zero."


def test_phase_one_messages(equality_min, infeasible):
    feasible = SimplexSession(build_phase_one(equality_min).tableau, Phase.ONE)
    assert feasible.solve_to_optimal().message == config.MSG_PHASE1_FEASIBLE
    assert feasible.status is Status.OPTIMAL

    session = SimplexSession(build_phase_one(infeasible).tableau, Phase.ONE)
    snap = session.solve_to_optimal()
    assert snap.status is Status.INFEASIBLE
    assert snap.message == "Phase 1 complete. Original problem is infeasible."
    assert snap.tableau.objective_value == pytest.approx(3)


def test_snapshot_frame(session):
    df = session.snapshot().to_frame()
    assert list(df.columns) == ['CB', 'x1', 'x2', 's1', 's2', 's3', 'RHS']
    assert list(df.index) == ['s1', 's2', 's3', 'Zj', 'Cj-Zj']
    assert df.loc['Cj-Zj', 'x2'] == 5
    assert df.loc['s3', 'RHS'] == 18
