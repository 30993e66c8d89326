"""
engine/base.py - Solver and engine contracts.

``Solver`` is the problem-level contract: any object turning a Problem into
a chosen Solution. ``OptimizationEngine`` is the state-level contract used by
iterative searches over a Feature.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Callable, Generic, Protocol, TypeVar, runtime_checkable

from ..core import Solution
from ..problem import Problem
from ..repr import Feature
from .schema import SearchResult

T = TypeVar("T")
F = TypeVar("F", bound=Feature)


@runtime_checkable
class Solver(Protocol[T]):
    """Anything that picks a Solution for a Problem."""

    def solve(self, problem: Problem[T]) -> Solution[T]:
        ...


class OptimizationEngine(ABC, Generic[F]):
    """Iterative search from an initial feature-typed state."""

    objective: Callable[[F], float]

    @abstractmethod
    def run(self, initial_state: F) -> SearchResult[F]:
        """Search from ``initial_state`` and return the terminal state with statistics."""

    def optimize(self, initial_state: F) -> F:
        """Search from ``initial_state`` and return the best state found."""
        return self.run(initial_state).state
