"""
engine/ - Search engines and solvers.

Provides the Solver/OptimizationEngine contracts, the deterministic hill
climber and two problem-level solvers built on them.
"""

from .enums import EngineStatus, TerminationReason
from .schema import HillClimberSettings, SearchResult
from .base import Solver, OptimizationEngine
from .hill_climber import HillClimber
from .solvers import CandidateSolver, HillClimbingSolver

__all__ = [
    # Enums
    "EngineStatus",
    "TerminationReason",
    # Schema
    "HillClimberSettings",
    "SearchResult",
    # Contracts
    "Solver",
    "OptimizationEngine",
    # Engines
    "HillClimber",
    # Solvers
    "CandidateSolver",
    "HillClimbingSolver",
]
