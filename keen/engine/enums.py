"""
engine/enums.py - Search engine enumerations.
"""

from enum import Enum


class EngineStatus(Enum):
    """Search state machine. SEARCHING is both initial and the only non-terminal state."""
    SEARCHING = "searching"
    TERMINATED = "terminated"


class TerminationReason(Enum):
    """Why a search stopped."""
    NO_IMPROVEMENT = "no_improvement"    # Local optimum reached
    MAX_ITERATIONS = "max_iterations"    # Iteration budget exhausted
    CANCELLED = "cancelled"              # should_stop() returned True
