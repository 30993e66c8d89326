"""
repr/vector.py - Fixed-order vector feature.

``map`` applies the function to every component. ``flat_map`` is the list
bind: each component produces a VectorFeature and the results are
concatenated in order, so ``pure`` is the one-element vector. ``zip_with``
pairs components positionally and stops at the shorter operand.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Iterable, Tuple, TypeVar

from .feature import Feature, FeatureFactory

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class VectorFeature(Feature[T]):
    """Immutable ordered collection of components."""
    values: Tuple[T, ...] = ()

    def __post_init__(self):
        # Accept any iterable but always store a tuple
        if not isinstance(self.values, tuple):
            object.__setattr__(self, "values", tuple(self.values))

    @classmethod
    def factory(cls) -> "VectorFeatureFactory":
        return VECTOR_FACTORY

    @classmethod
    def of(cls, values: Iterable[T]) -> "VectorFeature[T]":
        return cls(tuple(values))

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self):
        return iter(self.values)

    def __getitem__(self, index: int) -> T:
        return self.values[index]

    def map(self, f: Callable[[T], T]) -> "VectorFeature[T]":
        return VectorFeature(tuple(f(v) for v in self.values))

    def flat_map(self, f: Callable[[T], "VectorFeature[U]"]) -> "VectorFeature[U]":
        out = []
        for v in self.values:
            out.extend(f(v).values)
        return VectorFeature(tuple(out))

    def zip_with(
        self, other: "VectorFeature[T]", combine: Callable[[T, T], T]
    ) -> "VectorFeature[T]":
        return VectorFeature(tuple(combine(a, b) for a, b in zip(self.values, other.values)))


class VectorFeatureFactory(FeatureFactory[T, VectorFeature[T]]):
    """Stateless factory for VectorFeature."""

    def pure(self, value: T) -> VectorFeature[T]:
        return VectorFeature((value,))


VECTOR_FACTORY = VectorFeatureFactory()
