"""Feasible region and simplex path for 2-variable problems"""
import matplotlib.pyplot as plt
import numpy as np

from .problem import Relation
from .session import Phase, Status


def corner_points(history):
    """Vertices visited by the simplex method, one per snapshot.

    Phase 1 vertices are included (they may be infeasible for the original
    problem); only a final optimal Phase 2 / single-phase vertex is marked
    optimal.
    """
    points = []
    for snap in history:
        values = snap.tableau.values()
        point = (max(0.0, values.get('x1', 0.0)), max(0.0, values.get('x2', 0.0)))
        points.append({
            'point': point,
            'iteration': snap.iteration,
            'phase': snap.phase.value,
            'is_optimal': snap.status is Status.OPTIMAL and snap.phase is not Phase.ONE,
        })
    return points


def plot_feasible_region(problem, points=()):
    """Plot constraint lines, the feasible region and the simplex path"""
    if problem.num_vars != 2:
        return None

    fig, ax = plt.subplots(figsize=(10, 8))

    # Set up coordinate system
    x_max = max(20, max([cp['point'][0] for cp in points] + [10]))
    y_max = max(20, max([cp['point'][1] for cp in points] + [10]))

    x_range = np.linspace(0, x_max * 1.2, 400)
    y_range = np.linspace(0, y_max * 1.2, 400)
    X, Y = np.meshgrid(x_range, y_range)

    feasible_region = (X >= 0) & (Y >= 0)
    colors = ['red', 'blue', 'green', 'orange', 'purple', 'brown']

    for i, (relation, rhs) in enumerate(zip(problem.relations, problem.rhs)):
        a1, a2 = problem.constraints[i]
        color = colors[i % len(colors)]

        # Plot constraint line
        if abs(a2) > 1e-6:
            y_line = (rhs - a1 * x_range) / a2
            ax.plot(x_range, y_line, color=color,
                    label=f'{a1:g}x₁ + {a2:g}x₂ {relation.value} {rhs:g}', linewidth=2)
        elif abs(a1) > 1e-6:
            ax.axvline(x=rhs / a1, color=color, label=f'{a1:g}x₁ {relation.value} {rhs:g}', linewidth=2)

        lhs = a1 * X + a2 * Y
        if relation is Relation.LE:
            mask = lhs <= rhs + 1e-6
        elif relation is Relation.GE:
            mask = lhs >= rhs - 1e-6
        else:
            mask = np.abs(lhs - rhs) <= 1e-6
        feasible_region &= mask

    ax.contourf(X, Y, feasible_region.astype(int), levels=[0.5, 1.5], colors=['lightblue'], alpha=0.3)

    # Objective line through the optimum
    optimal = [cp['point'] for cp in points if cp['is_optimal']]
    if optimal:
        c1, c2 = problem.objective
        optimal_z = c1 * optimal[-1][0] + c2 * optimal[-1][1]
        if abs(c2) > 1e-6:
            ax.plot(x_range, (optimal_z - c1 * x_range) / c2, 'k--', linewidth=2, alpha=0.8,
                    label=f'Z = {optimal_z:.3f}')
        elif abs(c1) > 1e-6:
            ax.axvline(x=optimal_z / c1, color='black', linestyle='--', alpha=0.8)

    # Solution path
    if points:
        ax.plot([cp['point'][0] for cp in points], [cp['point'][1] for cp in points],
                'ro-', markersize=8, linewidth=2, alpha=0.7, label='Simplex Path')

        for cp in points:
            x, y = cp['point']
            if cp['is_optimal']:
                color, marker, size = 'gold', '*', 150
            else:
                color, marker, size = 'red', 'o', 80
            ax.scatter(x, y, c=color, marker=marker, s=size, edgecolors='black', linewidth=1, zorder=5)
            ax.annotate(f"{cp['phase']}\nIter {cp['iteration']}\n({x:.2f}, {y:.2f})",
                        (x, y), xytext=(x + x_max * 0.02, y + y_max * 0.02),
                        bbox=dict(boxstyle="round,pad=0.3", facecolor=color, alpha=0.7),
                        fontsize=8, ha='left')

    ax.set_xlim(0, x_max * 1.1)
    ax.set_ylim(0, y_max * 1.1)
    ax.set_xlabel('x₁', fontsize=12, fontweight='bold')
    ax.set_ylabel('x₂', fontsize=12, fontweight='bold')
    ax.grid(True, alpha=0.3)
    ax.legend(bbox_to_anchor=(1.05, 1), loc='upper left')

    c1, c2 = problem.objective
    ax.set_title(f"{problem.direction.value} Z = {c1:g}x₁ + {c2:g}x₂", fontsize=14, fontweight='bold', pad=20)

    fig.tight_layout()
    return fig
