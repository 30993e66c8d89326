"""
engine/solvers.py - Problem-level solvers.

Both solvers satisfy the ``Solver`` protocol (``solve(problem) -> Solution``)
and may be called directly: ``solver(problem)``.
"""

from __future__ import annotations
from typing import Generic, Iterable, Optional, Tuple, TypeVar
import logging

from ..core import Solution
from ..problem import Problem
from ..repr import VectorFeature
from .hill_climber import HillClimber
from .schema import SearchResult

T = TypeVar("T")

logger = logging.getLogger(__name__)


class CandidateSolver(Generic[T]):
    """
    Exhaustive pick over a fixed list of candidate solutions.

    Candidates are scored with one objective of the problem; ties keep the
    earliest candidate.
    """

    def __init__(
        self,
        candidates: Iterable[Solution[T]],
        objective_index: int = 0,
        maximize: bool = False,
    ):
        self.candidates: Tuple[Solution[T], ...] = tuple(candidates)
        if not self.candidates:
            raise ValueError("CandidateSolver requires at least one candidate")
        self.objective_index = objective_index
        self.maximize = maximize

    def solve(self, problem: Problem[T]) -> Solution[T]:
        objective = problem.objectives[self.objective_index]
        pick = max if self.maximize else min
        best = pick(self.candidates, key=objective)
        logger.debug(f"Selected {best!r} out of {len(self.candidates)} candidates")
        return best

    def __call__(self, problem: Problem[T]) -> Solution[T]:
        return self.solve(problem)


class HillClimbingSolver:
    """
    Runs HillClimber on a Problem, treating the Solution as a VectorFeature.

    With ``respect_constraints`` set, infeasible candidates score as the
    worst possible value and therefore end the climb.
    """

    def __init__(
        self,
        initial: Solution[float],
        step_size: float = 0.1,
        max_iterations: int = 100,
        objective_index: int = 0,
        maximize: bool = True,
        respect_constraints: bool = False,
    ):
        self.initial = initial
        self.step_size = step_size
        self.max_iterations = max_iterations
        self.objective_index = objective_index
        self.maximize = maximize
        self.respect_constraints = respect_constraints
        self.last_result: Optional[SearchResult[VectorFeature[float]]] = None

    def _score_function(self, problem: Problem[float]):
        objective = problem.objectives[self.objective_index]
        worst = float("-inf") if self.maximize else float("inf")

        def score(feature: VectorFeature[float]) -> float:
            solution = Solution.of(feature.values)
            if self.respect_constraints and not problem.is_feasible(solution):
                return worst
            return objective(solution)

        return score

    def solve(self, problem: Problem[float]) -> Solution[float]:
        engine = HillClimber(
            self._score_function(problem),
            step_size=self.step_size,
            max_iterations=self.max_iterations,
            maximize=self.maximize,
        )
        self.last_result = engine.run(VectorFeature.of(self.initial))
        return Solution.of(self.last_result.state.values)

    def __call__(self, problem: Problem[float]) -> Solution[float]:
        return self.solve(problem)
