"""
keen - Optimization problem modeling and local search.

Describe a problem as objectives plus constraints over a Solution, encode
search states as Features, and run an engine or solver against it.
"""

from .errors import KeenError, InvalidThresholdError, Ok, Err, Result
from .repr import Feature, FeatureFactory, ScalarFeature, VectorFeature
from .core import Solution, InequalityType, EqualityThreshold
from .problem import (
    Objective,
    Constraint,
    EqualityConstraint,
    InequalityConstraint,
    Problem,
    ProblemEvaluation,
)
from .engine import (
    EngineStatus,
    TerminationReason,
    SearchResult,
    Solver,
    OptimizationEngine,
    HillClimber,
    CandidateSolver,
    HillClimbingSolver,
)

__version__ = "0.1.0"

__all__ = [
    "KeenError",
    "InvalidThresholdError",
    "Ok",
    "Err",
    "Result",
    "Feature",
    "FeatureFactory",
    "ScalarFeature",
    "VectorFeature",
    "Solution",
    "InequalityType",
    "EqualityThreshold",
    "Objective",
    "Constraint",
    "EqualityConstraint",
    "InequalityConstraint",
    "Problem",
    "ProblemEvaluation",
    "EngineStatus",
    "TerminationReason",
    "SearchResult",
    "Solver",
    "OptimizationEngine",
    "HillClimber",
    "CandidateSolver",
    "HillClimbingSolver",
]
