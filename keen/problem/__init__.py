"""
problem/ - Objective/constraint evaluation model.
"""

from .objective import Objective
from .constraint import Constraint, EqualityConstraint, InequalityConstraint
from .problem import Problem, ProblemEvaluation

__all__ = [
    "Objective",
    "Constraint",
    "EqualityConstraint",
    "InequalityConstraint",
    "Problem",
    "ProblemEvaluation",
]
