import logging

import pandas as pd
import streamlit as st

from simplex_tableau import Direction, PhaseController, PhaseState, Problem
from simplex_tableau.formatting import to_fraction
from simplex_tableau.plotting import corner_points, plot_feasible_region

logger = logging.getLogger(__name__)


def render_tableau(snapshot):
    """Current tableau with the CB column, values shown as fractions"""
    df = snapshot.to_frame()
    shown = df.apply(lambda col: col.map(lambda v: "" if pd.isna(v) else to_fraction(v)))
    st.dataframe(shown, use_container_width=True)


def render_controller(controller):
    """Equations, tableau, status and the step buttons"""
    session = controller.session
    snapshot = session.snapshot()

    st.subheader(f"{session.phase.value} - Table {snapshot.iteration}")
    with st.expander("Equations", expanded=True):
        for line in controller.equations:
            st.write(line)

    render_tableau(snapshot)

    col1, col2 = st.columns(2)
    with col1:
        st.info(f"**Entering:** {snapshot.entering or '-'}")
    with col2:
        st.info(f"**Leaving:** {snapshot.leaving or '-'}")

    col1, col2, col3, col4 = st.columns(4)
    with col1:
        if st.button("Next Iteration", disabled=controller.finished):
            controller.step()
            st.rerun()
    with col2:
        if st.button("Solve to Optimal", disabled=controller.finished):
            controller.session.solve_to_optimal()
            st.rerun()
    with col3:
        if st.button("Reset"):
            controller.reset()
            st.rerun()
    with col4:
        if st.button("Proceed to Phase 2", disabled=controller.state is not PhaseState.PHASE1_OPTIMAL):
            controller.advance()
            st.rerun()

    state = controller.state
    if snapshot.message:
        if state in (PhaseState.INFEASIBLE, PhaseState.UNBOUNDED, PhaseState.STOPPED):
            st.error(snapshot.message)
        else:
            st.success(snapshot.message)


def render_solution(controller):
    solution = controller.solution()
    if not solution.optimal:
        return

    problem = controller.problem
    st.markdown("---")
    st.subheader("Final Solution")

    col1, col2 = st.columns(2)
    with col1:
        st.write("**Decision Variables:**")
        for name, value in solution.values.items():
            st.write(f"• {name} = {to_fraction(value)}")
    with col2:
        obj_type_str = "Maximum" if problem.maximize else "Minimum"
        st.write(f"**{obj_type_str} Z Value:** {to_fraction(solution.objective_value)}")
        if solution.alternative_optima:
            st.info("Multiple optimal solutions detected! Non-basic variables with zero "
                    f"Cj-Zj: {', '.join(solution.alternative_optima)}")

    # Plot feasible region for 2-variable problems
    if problem.num_vars == 2:
        st.markdown("---")
        st.subheader("Graphical Representation")
        points = corner_points(controller.history)
        st.pyplot(plot_feasible_region(problem, points))

        corner_data = []
        for cp in points:
            x, y = cp['point']
            corner_data.append({
                'Iteration': cp['iteration'],
                'Phase': cp['phase'],
                'Point (x₁, x₂)': f"({to_fraction(x)}, {to_fraction(y)})",
                'Z Value': to_fraction(problem.objective[0] * x + problem.objective[1] * y),
                'Status': "OPTIMAL" if cp['is_optimal'] else "Visited",
            })
        st.dataframe(pd.DataFrame(corner_data), use_container_width=True, hide_index=True)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    st.set_page_config(page_title="Simplex Solver", layout="wide")

    st.title("Simplex Solver")
    st.markdown("*Tableau simplex with the Two-Phase method*")
    st.markdown("---")

    # Input Section
    col1, col2 = st.columns(2)
    with col1:
        st.subheader("Problem Setup")
        obj_type = st.radio("Objective:", [d.value for d in Direction])
    with col2:
        num_vars = st.number_input("Number of Decision Variables:", min_value=1, max_value=10, value=2)
        num_constraints = st.number_input("Number of Constraints:", min_value=1, max_value=10, value=3)

    st.markdown("---")

    st.subheader("Objective Function Coefficients")
    obj_cols = st.columns(num_vars)
    c = []
    for i in range(num_vars):
        with obj_cols[i]:
            c.append(st.number_input(f"x{i+1}", value=1.0, key=f"c_{i}"))

    st.subheader("Constraints")
    st.info("Note: All decision variables are automatically constrained to be ≥ 0")

    A, b, relations = [], [], []
    for i in range(num_constraints):
        st.write(f"**Constraint {i+1}:**")
        cols = st.columns(num_vars + 2)
        row = []
        for j in range(num_vars):
            with cols[j]:
                row.append(st.number_input(f"x{j+1}", value=1.0, key=f"a_{i}_{j}", label_visibility="collapsed"))
        with cols[num_vars]:
            relations.append(st.selectbox("Relation", ["≤", "≥", "="], key=f"const_{i}",
                                          label_visibility="collapsed"))
        with cols[num_vars + 1]:
            b.append(st.number_input("RHS", value=10.0, key=f"b_{i}", label_visibility="collapsed"))
        A.append(row)

    st.markdown("---")

    if st.button("Solve Problem", type="primary"):
        try:
            problem = Problem(c, A, b, Direction(obj_type), relations)
        except ValueError as e:
            st.error(f"An error occurred: {e}")
            st.session_state.pop("controller", None)
        else:
            controller = PhaseController(problem)
            st.session_state["controller"] = controller
            method = "Two-Phase Method" if controller.two_phase else "Standard Simplex"
            logger.info("New problem: %r using %s", controller.problem, method)

    controller = st.session_state.get("controller")
    if controller is not None:
        method = "Two-Phase Method" if controller.two_phase else "Standard Simplex"
        st.info(f"Using method: **{method}**")
        render_controller(controller)
        render_solution(controller)


if __name__ == "__main__":
    main()
