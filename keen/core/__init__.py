"""
core/ - Solution values and constraint primitives.
"""

from .solution import Solution
from .enums import InequalityType
from .threshold import EqualityThreshold

__all__ = [
    "Solution",
    "InequalityType",
    "EqualityThreshold",
]
