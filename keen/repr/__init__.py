"""
repr/ - Solution representations.

Provides the Feature algebra and its concrete scalar and vector encodings.
"""

from .feature import Feature, FeatureFactory
from .scalar import ScalarFeature, ScalarFeatureFactory, SCALAR_FACTORY
from .vector import VectorFeature, VectorFeatureFactory, VECTOR_FACTORY

__all__ = [
    "Feature",
    "FeatureFactory",
    "ScalarFeature",
    "ScalarFeatureFactory",
    "SCALAR_FACTORY",
    "VectorFeature",
    "VectorFeatureFactory",
    "VECTOR_FACTORY",
]
