"""Tolerances, limits and status messages shared by the solver"""

# Derived rows, optimality check, ratio test and Phase 1 feasibility
ZERO_TOL = 1e-10

# Pivot element and elimination noise
PIVOT_TOL = 1e-12

# Safety valve for automatic solving (no anti-cycling rule)
MAX_AUTO_ITERATIONS = 100

# Fraction renderer
FRACTION_MAX_TERM = 10000

MSG_OPTIMAL = "Optimal solution reached."
MSG_UNBOUNDED = "Problem is unbounded (no valid leaving variable)."
MSG_PHASE1_FEASIBLE = "Phase 1 complete. Feasible solution found. Ready for Phase 2."
MSG_PHASE1_INFEASIBLE = "Phase 1 complete. Original problem is infeasible."
MSG_PHASE1_UNBOUNDED = "Phase 1 problem is unbounded."
MSG_PHASE2_OPTIMAL = "Phase 2 complete. Optimal solution found."
MSG_PHASE2_UNBOUNDED = "Phase 2 problem is unbounded."
MSG_ITERATION_LIMIT = "Stopped: reached maximum automatic iterations limit."
MSG_PIVOT_ERROR = "Error during pivot: {}"
MSG_AUTO_PIVOT_ERROR = "Error during automatic pivot: {}"
