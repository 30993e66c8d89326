"""
keen test configuration and fixtures.
"""

import logging

import pytest

from keen.core import Solution
from keen.problem import EqualityConstraint, InequalityConstraint, Objective, Problem
from keen.core import InequalityType


@pytest.fixture
def four_solution():
    """Solution (1, 2, 3, 4): sum 10, product 24."""
    return Solution(1.0, 2.0, 3.0, 4.0)


@pytest.fixture
def sum_product_problem():
    """Two objectives (sum, product), sum == 10 and product <= 100."""
    return Problem(
        Objective(lambda s: s.sum(), name="sum"),
        Objective(lambda s: s[0] * s[1] * s[2] * s[3], name="product"),
        constraints=[
            EqualityConstraint.with_default_threshold(
                left=lambda s: s.sum(),
                right=lambda s: 10.0,
                name="sum_is_ten",
            ).unwrap(),
            InequalityConstraint(
                left=lambda s: s[0] * s[1] * s[2] * s[3],
                right=lambda s: 100.0,
                type=InequalityType.LESS_THAN_OR_EQUAL,
                name="product_at_most_100",
            ),
        ],
        name="sum_product",
    )


@pytest.fixture
def reset_keen_logger():
    """Restore the keen logger after tests that reconfigure it."""
    keen_logger = logging.getLogger("keen")
    level = keen_logger.level
    handlers = list(keen_logger.handlers)
    yield keen_logger
    for handler in list(keen_logger.handlers):
        if handler not in handlers:
            keen_logger.removeHandler(handler)
            handler.close()
    keen_logger.setLevel(level)
