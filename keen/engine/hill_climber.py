"""
engine/hill_climber.py - First-improvement hill climber.

Each iteration perturbs every component of the current state by a fixed
step (``state.map(lambda x: x + step_size)``) and scores the candidate.
A strictly better score replaces the current state; anything else ends the
search at once. There is no randomness and no restart.

The search is a two-state machine: it starts SEARCHING and moves to
TERMINATED on the first rejected candidate, when the iteration budget runs
out, or when ``should_stop`` reports cancellation at an iteration boundary.
"""

from __future__ import annotations
from datetime import datetime, timezone
from typing import Callable, Optional, TYPE_CHECKING
import logging
import time

from .base import F, OptimizationEngine
from .enums import EngineStatus, TerminationReason
from .schema import HillClimberSettings, SearchResult

if TYPE_CHECKING:
    from ..bootstrap.config import EngineConfig

logger = logging.getLogger(__name__)


class HillClimber(OptimizationEngine[F]):
    """
    Deterministic local search over a Feature.

    Scores produced by the objective are compared as-is; a NaN score never
    compares better, so it ends the search like any other rejection.
    """

    def __init__(
        self,
        objective: Callable[[F], float],
        step_size: float = 0.1,
        max_iterations: int = 100,
        maximize: bool = True,
        should_stop: Optional[Callable[[], bool]] = None,
        callback: Optional[Callable[[int, F, float], None]] = None,
    ):
        """
        Initialize hill climber.

        Args:
            objective: Scoring function over states
            step_size: Amount added to every component per iteration
            max_iterations: Maximum number of iterations attempted
            maximize: Accept strictly higher scores if True, strictly lower otherwise
            should_stop: Optional cancellation check, polled before each iteration
            callback: Optional callback(iteration, state, score) after each accepted move

        Raises:
            pydantic.ValidationError: if step_size or max_iterations is invalid
        """
        self.objective = objective
        self.settings = HillClimberSettings(
            step_size=step_size,
            max_iterations=max_iterations,
            maximize=maximize,
        )
        self.should_stop = should_stop
        self.callback = callback

    @classmethod
    def from_config(
        cls,
        objective: Callable[[F], float],
        config: "EngineConfig",
        **kwargs,
    ) -> "HillClimber[F]":
        """Build a hill climber from an EngineConfig section."""
        return cls(
            objective,
            step_size=config.step_size,
            max_iterations=config.max_iterations,
            maximize=config.maximize,
            **kwargs,
        )

    @property
    def step_size(self) -> float:
        return self.settings.step_size

    @property
    def max_iterations(self) -> int:
        return self.settings.max_iterations

    @property
    def maximize(self) -> bool:
        return self.settings.maximize

    def perturb(self, state: F) -> F:
        """Generate the single candidate for this iteration."""
        step = self.settings.step_size
        return state.map(lambda x: x + step)

    def is_improvement(self, candidate_score: float, best_score: float) -> bool:
        if self.settings.maximize:
            return candidate_score > best_score
        return candidate_score < best_score

    def run(self, initial_state: F) -> SearchResult[F]:
        """
        Climb from ``initial_state``.

        Returns:
            SearchResult whose ``state`` is the best state found
        """
        start_time = time.time()
        result = SearchResult(
            state=initial_state,
            score=self.objective(initial_state),
            status=EngineStatus.SEARCHING,
            started_at=datetime.now(timezone.utc),
        )
        result.evaluations = 1
        result.history.append(result.score)

        logger.info(
            f"Hill climb started: score={result.score}, step={self.step_size}, "
            f"max_iterations={self.max_iterations}"
        )

        while result.status == EngineStatus.SEARCHING:
            if result.iterations >= self.max_iterations:
                result.reason = TerminationReason.MAX_ITERATIONS
                result.status = EngineStatus.TERMINATED
                break

            if self.should_stop is not None and self.should_stop():
                result.reason = TerminationReason.CANCELLED
                result.status = EngineStatus.TERMINATED
                break

            result.iterations += 1
            candidate = self.perturb(result.state)
            candidate_score = self.objective(candidate)
            result.evaluations += 1

            if self.is_improvement(candidate_score, result.score):
                logger.debug(
                    f"Iteration {result.iterations}: accepted {candidate!r} "
                    f"({result.score} -> {candidate_score})"
                )
                result.state = candidate
                result.score = candidate_score
                result.history.append(candidate_score)
                if self.callback:
                    self.callback(result.iterations, candidate, candidate_score)
            else:
                logger.debug(
                    f"Iteration {result.iterations}: rejected {candidate!r} "
                    f"(score {candidate_score})"
                )
                result.reason = TerminationReason.NO_IMPROVEMENT
                result.status = EngineStatus.TERMINATED

        result.elapsed_time_s = time.time() - start_time
        result.completed_at = datetime.now(timezone.utc)

        logger.info(
            f"Hill climb terminated ({result.reason.value}) after "
            f"{result.iterations} iterations: score={result.score}"
        )
        return result
