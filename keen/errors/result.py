"""
errors/result.py - Two-variant success/error result.

Construction paths that may fail on caller input (threshold validation and
the constraints built on top of it) return ``Ok`` or ``Err`` instead of
raising, so the failure stops at the construction boundary.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Generic, NoReturn, Optional, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful result holding ``value``."""
    value: T

    @property
    def is_ok(self) -> bool:
        return True

    @property
    def is_err(self) -> bool:
        return False

    @property
    def error(self) -> None:
        return None

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def get_or_none(self) -> Optional[T]:
        return self.value

    def map(self, f: Callable[[T], U]) -> "Ok[U]":
        return Ok(f(self.value))

    def and_then(self, f: Callable[[T], "Result[U, E]"]) -> "Result[U, E]":
        return f(self.value)


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed result holding the typed ``error``."""
    error: E

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise self.error

    def unwrap_or(self, default: T) -> T:
        return default

    def get_or_none(self) -> None:
        return None

    def map(self, f: Callable) -> "Err[E]":
        return self

    def and_then(self, f: Callable) -> "Err[E]":
        return self


Result = Union[Ok[T], Err[E]]
