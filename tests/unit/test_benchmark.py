"""
tests/unit/test_benchmark.py - Tests for benchmark objectives and problems.
"""

import pytest

from keen.benchmark import (
    rosenbrock,
    rosenbrock_problem,
    sphere,
    sphere_constraint,
    sphere_problem,
)
from keen.core import InequalityType, Solution


class TestRosenbrock:
    """Tests for the Rosenbrock objective."""

    def test_global_minimum(self):
        assert rosenbrock()(Solution(1.0, 1.0, 1.0)) == 0.0

    def test_origin(self):
        # Two pairs, each contributing (1 - 0)^2
        assert rosenbrock()(Solution(0.0, 0.0, 0.0)) == pytest.approx(2.0)

    def test_known_value(self):
        # 100 * (1 - 4)^2 + (1 - 2)^2
        assert rosenbrock()(Solution(2.0, 1.0)) == pytest.approx(901.0)

    def test_single_component_has_no_pairs(self):
        assert rosenbrock()(Solution(5.0)) == 0.0

    def test_empty_solution(self):
        assert rosenbrock()(Solution()) == 0.0

    def test_sums_over_consecutive_pairs(self):
        solution = Solution(0.5, -1.0, 2.0, 0.0)
        expected = sum(100.0 * (y - x ** 2) ** 2 + (1.0 - x) ** 2 for x, y in solution.pairs())
        assert rosenbrock()(solution) == pytest.approx(expected)

    def test_problem(self):
        problem = rosenbrock_problem([sphere_constraint(dims=3)])
        assert problem.name == "rosenbrock"
        assert problem.n_obj == 1
        assert problem.n_constr == 1
        assert problem.objective(Solution(1.0, 1.0, 1.0)) == 0.0
        assert not problem.is_feasible(Solution(1.0, 1.0, 1.0))


class TestSphere:
    """Tests for the sphere objective and constraint."""

    def test_value(self):
        assert sphere()(Solution(1.0, 2.0, 3.0)) == pytest.approx(14.0)

    def test_problem_has_no_constraints(self):
        problem = sphere_problem()
        assert problem.n_constr == 0
        assert problem.objective(Solution(0.0)) == 0.0

    def test_constraint_uses_leading_components(self):
        constraint = sphere_constraint(dims=2, radius=1.0)
        assert constraint.type == InequalityType.LESS_THAN_OR_EQUAL
        assert constraint(Solution(0.6, 0.7, 100.0))
        assert not constraint(Solution(1.0, 0.5))

    def test_constraint_radius(self):
        constraint = sphere_constraint(dims=1, radius=2.0)
        assert constraint(Solution(2.0))
        assert not constraint(Solution(2.1))
