"""
repr/scalar.py - Single-value feature.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Any, Callable, TypeVar

from .feature import Feature, FeatureFactory

T = TypeVar("T")


@dataclass(frozen=True)
class ScalarFeature(Feature[T]):
    """Canonical feature wrapping exactly one value."""
    value: T

    @classmethod
    def factory(cls) -> "ScalarFeatureFactory":
        return SCALAR_FACTORY

    def map(self, f: Callable[[T], T]) -> "ScalarFeature[T]":
        return replace(self, value=f(self.value))

    def flat_map(self, f: Callable[[T], Any]) -> Any:
        return f(self.value)

    def zip_with(
        self, other: "ScalarFeature[T]", combine: Callable[[T, T], T]
    ) -> "ScalarFeature[T]":
        return ScalarFeature(combine(self.value, other.value))


class ScalarFeatureFactory(FeatureFactory[T, ScalarFeature[T]]):
    """Stateless factory for ScalarFeature."""

    def pure(self, value: T) -> ScalarFeature[T]:
        return ScalarFeature(value)


SCALAR_FACTORY = ScalarFeatureFactory()
