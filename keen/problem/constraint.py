"""
problem/constraint.py - Equality and inequality constraints.

A constraint holds two side functions, ``left`` and ``right``, each mapping a
Solution to a float, and evaluates to a boolean verdict.

    EqualityConstraint:   |left(s) - right(s)| <= threshold
    InequalityConstraint: left(s) <op> right(s)

Only EqualityConstraint construction can fail, and only through its
``with_default_threshold``/``build`` helpers, which return a Result.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, TypeVar

from ..core import EqualityThreshold, InequalityType, Solution
from ..errors import InvalidThresholdError, Result

T = TypeVar("T")

SideFunction = Callable[[Solution], float]


class Constraint(ABC, Generic[T]):
    """Predicate over a Solution built from two side functions."""

    left: SideFunction
    right: SideFunction
    name: str

    @abstractmethod
    def __call__(self, solution: Solution[T]) -> bool:
        """Return True when the solution satisfies the constraint."""

    @property
    @abstractmethod
    def symbol(self) -> str:
        """Relation symbol used in descriptions."""

    @abstractmethod
    def violation(self, solution: Solution[T]) -> float:
        """Amount by which the constraint is missed (0.0 when satisfied)."""

    def is_satisfied(self, solution: Solution[T]) -> bool:
        return self(solution)

    def describe(self, solution: Solution[T]) -> str:
        """Render the evaluated relation, e.g. ``1.0 < 2.0``."""
        return f"{self.left(solution)} {self.symbol} {self.right(solution)}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type": type(self).__name__,
            "symbol": self.symbol,
        }


@dataclass(frozen=True)
class EqualityConstraint(Constraint[T]):
    """Approximate equality within a validated threshold."""
    left: SideFunction
    right: SideFunction
    threshold: EqualityThreshold
    name: str = ""

    @classmethod
    def build(
        cls,
        left: SideFunction,
        right: SideFunction,
        threshold: Result[EqualityThreshold, InvalidThresholdError],
        name: str = "",
    ) -> Result["EqualityConstraint[T]", InvalidThresholdError]:
        """Bind a previously validated threshold result; an Err passes through unchanged."""
        return threshold.map(lambda t: cls(left, right, t, name))

    @classmethod
    def with_default_threshold(
        cls,
        left: SideFunction,
        right: SideFunction,
        threshold: float = EqualityThreshold.DEFAULT,
        name: str = "",
    ) -> Result["EqualityConstraint[T]", InvalidThresholdError]:
        """Validate a raw tolerance (default 1e-9) and build the constraint."""
        return cls.build(left, right, EqualityThreshold.create(threshold), name)

    def __call__(self, solution: Solution[T]) -> bool:
        return abs(self.left(solution) - self.right(solution)) <= self.threshold.value

    @property
    def symbol(self) -> str:
        return "=="

    def violation(self, solution: Solution[T]) -> float:
        diff = abs(self.left(solution) - self.right(solution))
        return max(0.0, diff - self.threshold.value)

    def describe(self, solution: Solution[T]) -> str:
        return f"{super().describe(solution)} (± {self.threshold.value})"

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["threshold"] = self.threshold.value
        return data


@dataclass(frozen=True)
class InequalityConstraint(Constraint[T]):
    """Directional relation between the two sides."""
    left: SideFunction
    right: SideFunction
    type: InequalityType = InequalityType.LESS_THAN
    name: str = ""

    def __call__(self, solution: Solution[T]) -> bool:
        return self.type.compare(self.left(solution), self.right(solution))

    @property
    def symbol(self) -> str:
        return self.type.symbol

    def violation(self, solution: Solution[T]) -> float:
        lhs = self.left(solution)
        rhs = self.right(solution)
        if self.type.compare(lhs, rhs):
            return 0.0
        return abs(lhs - rhs)
