"""
benchmark/functions.py - Standard benchmark objectives and problems.

Rosenbrock:
    f(x) = sum_i 100 * (x[i+1] - x[i]^2)^2 + (1 - x[i])^2
    Global minimum 0 at x = (1, ..., 1).

Sphere:
    f(x) = sum_i x[i]^2
    Global minimum 0 at the origin.
"""

from typing import Iterable

import numpy as np

from ..core import InequalityType, Solution
from ..problem import Constraint, InequalityConstraint, Objective, Problem


def rosenbrock() -> Objective[float]:
    """Rosenbrock objective over consecutive pairs of the solution."""

    def _rosenbrock(solution: Solution[float]) -> float:
        pairs = np.asarray(solution.pairs(), dtype=float).reshape(-1, 2)
        x, y = pairs[:, 0], pairs[:, 1]
        return float(np.sum(100.0 * (y - x ** 2) ** 2 + (1.0 - x) ** 2))

    return Objective(_rosenbrock, name="rosenbrock", description="Rosenbrock valley")


def sphere() -> Objective[float]:
    """Sum of squares."""

    def _sphere(solution: Solution[float]) -> float:
        x = np.asarray(solution.to_list(), dtype=float)
        return float(np.sum(x ** 2))

    return Objective(_sphere, name="sphere", description="Sum of squares")


def sphere_constraint(dims: int, radius: float = 1.0) -> InequalityConstraint[float]:
    """
    Keep the first ``dims`` components inside a ball of ``radius``.

    Args:
        dims: Number of leading components considered
        radius: Ball radius
    """
    return InequalityConstraint(
        left=lambda s: float(np.sum(np.asarray(s.take(dims).to_list(), dtype=float) ** 2)),
        right=lambda s: radius ** 2,
        type=InequalityType.LESS_THAN_OR_EQUAL,
        name=f"sphere_{dims}d_r{radius}",
    )


def rosenbrock_problem(constraints: Iterable[Constraint[float]] = ()) -> Problem[float]:
    """Single-objective Rosenbrock problem."""
    return Problem(rosenbrock(), constraints=constraints, name="rosenbrock")


def sphere_problem(constraints: Iterable[Constraint[float]] = ()) -> Problem[float]:
    """Single-objective sphere problem."""
    return Problem(sphere(), constraints=constraints, name="sphere")
