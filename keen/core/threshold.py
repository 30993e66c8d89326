"""
core/threshold.py - Validated tolerance for equality constraints.

An EqualityThreshold is always non-negative, finite and not NaN. Use
``EqualityThreshold.create`` to get an ``Ok``/``Err`` result instead of an
exception; calling the class directly raises InvalidThresholdError.
"""

from __future__ import annotations
from dataclasses import dataclass
import math

from ..errors import ErrorCode, InvalidThresholdError, Ok, Err, Result


@dataclass(frozen=True)
class EqualityThreshold:
    """Non-negative, finite tolerance."""
    value: float

    STRICT = 1e-9
    RELAXED = 1e-6
    EXACT = 0.0
    DEFAULT = STRICT

    def __post_init__(self):
        error = _check(self.value)
        if error is not None:
            raise error
        object.__setattr__(self, "value", float(self.value))

    @classmethod
    def create(cls, value: float) -> Result["EqualityThreshold", InvalidThresholdError]:
        """Validate ``value`` and wrap it, never raising."""
        error = _check(value)
        if error is not None:
            return Err(error)
        return Ok(cls(float(value)))

    @classmethod
    def strict(cls) -> "EqualityThreshold":
        return cls(cls.STRICT)

    @classmethod
    def relaxed(cls) -> "EqualityThreshold":
        return cls(cls.RELAXED)

    @classmethod
    def exact(cls) -> "EqualityThreshold":
        return cls(cls.EXACT)

    @classmethod
    def default(cls) -> "EqualityThreshold":
        return cls(cls.DEFAULT)

    def __float__(self) -> float:
        return self.value


def _check(value: float):
    # Order matters: NaN is neither finite nor comparable
    if math.isnan(value):
        return InvalidThresholdError("not be NaN", value, code=ErrorCode.THR_NAN)
    if math.isinf(value):
        return InvalidThresholdError("be finite", value, code=ErrorCode.THR_INFINITE)
    if value < 0.0:
        return InvalidThresholdError("be non-negative", value, code=ErrorCode.THR_NEGATIVE)
    return None
