"""
repr/feature.py - Feature algebra.

A feature is an immutable container around the internal representation of a
candidate solution. Every concrete feature must obey the functor laws

    f.map(identity) == f
    f.map(g).map(h) == f.map(lambda x: h(g(x)))

and, together with its factory's ``pure``, the monad laws

    pure(a).flat_map(f) == f(a)
    m.flat_map(pure) == m
    m.flat_map(f).flat_map(g) == m.flat_map(lambda x: f(x).flat_map(g))

``zip_with`` merges two features of the same concrete type. It is only as
commutative as the combining function handed to it; callers that need
``a.zip_with(b, c) == b.zip_with(a, c)`` must supply a commutative ``c``.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Callable, Generic, TypeVar

T = TypeVar("T")
F = TypeVar("F", bound="Feature")
F2 = TypeVar("F2", bound="Feature")


class Feature(ABC, Generic[T]):
    """Law-abiding container over a candidate encoding."""

    @classmethod
    @abstractmethod
    def factory(cls) -> "FeatureFactory":
        """Return the factory that lifts plain values into this feature type."""

    def map(self: F, f: Callable[[T], T]) -> F:
        """Transform the wrapped value, returning a new feature of the same type."""
        pure = type(self).factory().pure
        return self.flat_map(lambda x: pure(f(x)))

    @abstractmethod
    def flat_map(self, f: Callable[[T], F2]) -> F2:
        """Sequence a value-dependent, feature-producing computation."""

    @abstractmethod
    def zip_with(self: F, other: F, combine: Callable[[T, T], T]) -> F:
        """Combine this feature with ``other`` value by value."""


class FeatureFactory(ABC, Generic[T, F]):
    """Construction capability for a feature type, kept apart from the type itself."""

    @abstractmethod
    def pure(self, value: T) -> F:
        """Lift a plain value into the feature type."""

    def of(self, value: T) -> F:
        return self.pure(value)

    def just(self, value: T) -> F:
        return self.pure(value)

    def lift(self, f: Callable[[T], T]) -> Callable[[F], F]:
        """Promote a value-level function to a feature-level one."""
        return lambda feature: feature.map(f)
