"""
core/solution.py - Candidate solution values.

A Solution is an ordered, fixed-length, read-only sequence of decision
variable values. Objectives and constraints receive it and are free to index
it; indexing past the end raises the usual IndexError and is the caller's
responsibility.
"""

from __future__ import annotations
from collections.abc import Sequence
from typing import Any, Generic, Iterable, Iterator, List, Tuple, TypeVar, Union, overload

T = TypeVar("T")


class Solution(Sequence, Generic[T]):
    """Immutable sequence of decision-variable values."""

    __slots__ = ("_values",)

    def __init__(self, *values: T):
        self._values: Tuple[T, ...] = tuple(values)

    @classmethod
    def of(cls, values: Iterable[T]) -> "Solution[T]":
        """Build a solution from any iterable (list, tuple, numpy array, ...)."""
        return cls(*values)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> "Solution[T]": ...

    def __getitem__(self, index: Union[int, slice]) -> Union[T, "Solution[T]"]:
        if isinstance(index, slice):
            return Solution(*self._values[index])
        return self._values[index]

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[T]:
        return iter(self._values)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Solution):
            return self._values == other._values
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        return f"Solution{self._values!r}"

    @property
    def first(self) -> T:
        return self._values[0]

    @property
    def last(self) -> T:
        return self._values[-1]

    def sum(self) -> T:
        return sum(self._values)

    def mean(self) -> float:
        """Arithmetic mean. Raises ZeroDivisionError on an empty solution."""
        return sum(self._values) / len(self._values)

    def take(self, n: int) -> "Solution[T]":
        return Solution(*self._values[:n])

    def pairs(self) -> List[Tuple[T, T]]:
        """Consecutive pairs ``(x[i], x[i + 1])``."""
        return list(zip(self._values, self._values[1:]))

    def to_list(self) -> List[T]:
        return list(self._values)
