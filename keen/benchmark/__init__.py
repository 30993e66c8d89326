"""
benchmark/ - Benchmark problems built on the evaluation model.
"""

from .functions import (
    rosenbrock,
    sphere,
    sphere_constraint,
    rosenbrock_problem,
    sphere_problem,
)

__all__ = [
    "rosenbrock",
    "sphere",
    "sphere_constraint",
    "rosenbrock_problem",
    "sphere_problem",
]
