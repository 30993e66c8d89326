"""
problem/problem.py - Optimization problem definition.

A Problem bundles one or more objectives with zero or more constraints. It
does not decide feasibility on its own; ``evaluate`` and ``is_feasible``
simply run every constraint against a candidate.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Iterable, List, Tuple, TypeVar, Union
import logging

from ..core import Solution
from .constraint import Constraint
from .objective import Objective

T = TypeVar("T")

logger = logging.getLogger(__name__)

ObjectiveLike = Union[Objective, Callable[[Solution], float]]


def _as_objective(obj: ObjectiveLike) -> Objective:
    if isinstance(obj, Objective):
        return obj
    return Objective(obj)


@dataclass(frozen=True)
class ProblemEvaluation:
    """Objective values and constraint verdicts for one solution."""
    objectives: Tuple[float, ...] = ()
    satisfied: Tuple[bool, ...] = ()
    violation: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "objectives", tuple(self.objectives))
        object.__setattr__(self, "satisfied", tuple(self.satisfied))

    @property
    def is_feasible(self) -> bool:
        return all(self.satisfied)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "objectives": [round(o, 6) for o in self.objectives],
            "satisfied": list(self.satisfied),
            "violation": round(self.violation, 6),
            "is_feasible": self.is_feasible,
        }


class Problem(Generic[T]):
    """
    Immutable set of objectives and constraints over ``Solution[T]``.

    Objectives keep their insertion order. The first one is what
    single-objective solvers use by default.
    """

    __slots__ = ("_objectives", "_constraints", "name")

    def __init__(
        self,
        *objectives: ObjectiveLike,
        constraints: Iterable[Constraint[T]] = (),
        name: str = "",
    ):
        if not objectives:
            raise ValueError("Problem requires at least one objective")
        object.__setattr__(self, "_objectives", tuple(_as_objective(o) for o in objectives))
        object.__setattr__(self, "_constraints", tuple(constraints))
        object.__setattr__(self, "name", name)

    def __setattr__(self, key: str, value: Any) -> None:
        raise AttributeError(f"Problem is immutable; cannot set {key!r}")

    def __delattr__(self, key: str) -> None:
        raise AttributeError(f"Problem is immutable; cannot delete {key!r}")

    @classmethod
    def of(
        cls,
        objectives: Iterable[ObjectiveLike],
        constraints: Iterable[Constraint[T]] = (),
        name: str = "",
    ) -> "Problem[T]":
        return cls(*objectives, constraints=constraints, name=name)

    @property
    def objectives(self) -> Tuple[Objective[T], ...]:
        return self._objectives

    @property
    def constraints(self) -> Tuple[Constraint[T], ...]:
        return self._constraints

    @property
    def objective(self) -> Objective[T]:
        """Conventional default objective for single-objective use."""
        return self._objectives[0]

    @property
    def n_obj(self) -> int:
        return len(self._objectives)

    @property
    def n_constr(self) -> int:
        return len(self._constraints)

    def violated_constraints(self, solution: Solution[T]) -> List[Constraint[T]]:
        return [c for c in self._constraints if not c(solution)]

    def is_feasible(self, solution: Solution[T]) -> bool:
        return all(c(solution) for c in self._constraints)

    def total_violation(self, solution: Solution[T]) -> float:
        return sum(c.violation(solution) for c in self._constraints)

    def evaluate(self, solution: Solution[T]) -> ProblemEvaluation:
        """Score every objective and check every constraint."""
        evaluation = ProblemEvaluation(
            objectives=[obj(solution) for obj in self._objectives],
            satisfied=[c(solution) for c in self._constraints],
            violation=self.total_violation(solution),
        )
        if not evaluation.is_feasible:
            logger.debug(
                f"Solution {solution!r} violates {evaluation.satisfied.count(False)} "
                f"of {self.n_constr} constraints in problem '{self.name}'"
            )
        return evaluation

    def __repr__(self) -> str:
        return f"Problem(name={self.name!r}, n_obj={self.n_obj}, n_constr={self.n_constr})"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "n_obj": self.n_obj,
            "n_constr": self.n_constr,
            "objectives": [o.to_dict() for o in self._objectives],
            "constraints": [c.to_dict() for c in self._constraints],
        }
