"""
engine/schema.py - Engine settings and search results.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from .enums import EngineStatus, TerminationReason

S = TypeVar("S")


class HillClimberSettings(BaseModel):
    """Validated hill-climber parameters."""

    model_config = ConfigDict(frozen=True)

    step_size: float = Field(
        default=0.1,
        allow_inf_nan=False,
        description="Perturbation added to every component per iteration",
    )
    max_iterations: int = Field(
        default=100, ge=0, description="Upper bound on iterations attempted"
    )
    maximize: bool = Field(
        default=True, description="Accept strictly higher scores (False: strictly lower)"
    )


@dataclass
class SearchResult(Generic[S]):
    """Terminal state of a search plus run statistics."""
    state: S
    score: float
    status: EngineStatus = EngineStatus.SEARCHING
    reason: Optional[TerminationReason] = None

    # Statistics
    iterations: int = 0
    evaluations: int = 0
    elapsed_time_s: float = 0.0
    history: List[float] = field(default_factory=list)

    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    @property
    def improved(self) -> bool:
        """True when at least one candidate was accepted."""
        return len(self.history) > 1

    @property
    def is_terminated(self) -> bool:
        return self.status == EngineStatus.TERMINATED

    def to_dict(self) -> Dict[str, Any]:
        return {
            "state": repr(self.state),
            "score": self.score,
            "status": self.status.value,
            "reason": self.reason.value if self.reason else None,
            "statistics": {
                "iterations": self.iterations,
                "evaluations": self.evaluations,
                "elapsed_time_s": round(self.elapsed_time_s, 6),
            },
            "history": list(self.history),
            "started_at": self.started_at.isoformat() if self.started_at else None,
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
        }
