import matplotlib
import pytest

from simplex_tableau import Direction, Problem

matplotlib.use("Agg")


@pytest.fixture
def textbook_max():
    """maximize 3x1 + 5x2; x1 <= 4, 2x2 <= 12, 3x1 + 2x2 <= 18"""
    return Problem([3, 5], [[1, 0], [0, 2], [3, 2]], [4, 12, 18], Direction.MAXIMIZE)


@pytest.fixture
def equality_min():
    """minimize x1 + x2; 2x1 + x2 = 4, x1 + 2x2 = 3"""
    return Problem([1, 1], [[2, 1], [1, 2]], [4, 3], Direction.MINIMIZE, ["=", "="])


@pytest.fixture
def infeasible():
    """x1 + x2 <= 2 and x1 + x2 >= 5"""
    return Problem([1, 1], [[1, 1], [1, 1]], [2, 5], Direction.MAXIMIZE, ["<=", ">="])


@pytest.fixture
def unbounded():
    """maximize x1; x1 - x2 <= 1"""
    return Problem([1, 0], [[1, -1]], [1], Direction.MAXIMIZE)
