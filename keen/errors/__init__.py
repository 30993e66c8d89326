"""
errors/ - Error taxonomy and result values.
"""

from .taxonomy import (
    ErrorCategory,
    ErrorCode,
    KeenError,
    InvalidThresholdError,
)

from .result import Ok, Err, Result

__all__ = [
    # Taxonomy
    "ErrorCategory",
    "ErrorCode",
    "KeenError",
    "InvalidThresholdError",
    # Result
    "Ok",
    "Err",
    "Result",
]
