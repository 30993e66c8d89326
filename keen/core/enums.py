"""
core/enums.py - Constraint relation enumerations.
"""

from enum import Enum
import operator


class InequalityType(Enum):
    """Directional relation between the two sides of an inequality constraint."""
    LESS_THAN = "<"
    GREATER_THAN = ">"
    LESS_THAN_OR_EQUAL = "<="
    GREATER_THAN_OR_EQUAL = ">="

    @property
    def symbol(self) -> str:
        return self.value

    def compare(self, left: float, right: float) -> bool:
        """Evaluate ``left <op> right``."""
        return _OPERATORS[self](left, right)


# Every member must have an entry; a missing one raises KeyError in compare
_OPERATORS = {
    InequalityType.LESS_THAN: operator.lt,
    InequalityType.GREATER_THAN: operator.gt,
    InequalityType.LESS_THAN_OR_EQUAL: operator.le,
    InequalityType.GREATER_THAN_OR_EQUAL: operator.ge,
}
