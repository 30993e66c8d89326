"""
errors/taxonomy.py - Error classification for keen.

All domain errors raised by the library derive from KeenError. Each carries
a code and category so callers can branch on them without parsing messages.
"""

from __future__ import annotations
from enum import Enum
from typing import Any, Dict, Optional


class ErrorCategory(Enum):
    """Error categories."""
    THRESHOLD = "threshold"
    CONFIGURATION = "configuration"


class ErrorCode(Enum):
    """Specific error codes."""

    # Threshold (1xxx)
    THR_NAN = 1001
    THR_INFINITE = 1002
    THR_NEGATIVE = 1003

    # Configuration (2xxx)
    CFG_INVALID = 2001


class KeenError(Exception):
    """Base class for every error raised by keen."""

    code: ErrorCode = ErrorCode.CFG_INVALID
    category: ErrorCategory = ErrorCategory.CONFIGURATION

    def __init__(
        self,
        message: str,
        actual_value: Any = None,
        expected: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.actual_value = actual_value
        self.expected = expected

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": type(self).__name__,
            "code": self.code.value,
            "category": self.category.value,
            "message": self.message,
            "actual_value": self.actual_value,
            "expected": self.expected,
        }


class InvalidThresholdError(KeenError):
    """
    Raised (or carried inside an Err) when an equality threshold is invalid.

    The message states the violated rule and the offending value, e.g.
    ``Threshold should be non-negative, but was -1.0``.
    """

    category = ErrorCategory.THRESHOLD

    def __init__(self, should: str, threshold: float, code: ErrorCode = ErrorCode.THR_NEGATIVE):
        super().__init__(
            f"Threshold should {should}, but was {threshold}",
            actual_value=threshold,
            expected=should,
        )
        self.should = should
        self.threshold = threshold
        self.code = code
