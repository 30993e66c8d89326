"""
problem/objective.py - Objective functions.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, TypeVar

from ..core import Solution

T = TypeVar("T")


@dataclass(frozen=True)
class Objective(Generic[T]):
    """
    Pure scoring function from a Solution to a float.

    The wrapped function must only index positions that exist in the
    solutions it is given.
    """
    function: Callable[[Solution[T]], float]
    name: str = ""
    description: str = ""

    def __call__(self, solution: Solution[T]) -> float:
        return self.function(solution)

    def evaluate(self, solution: Solution[T]) -> float:
        return self.function(solution)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name or getattr(self.function, "__name__", ""),
            "description": self.description,
        }
