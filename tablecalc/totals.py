"""
Reduce a CalculationResult to a single total.

Pure math. Amounts are added left to right in row order.
"""

import logging

from .results import ValueResult

logger = logging.getLogger(__name__)


def calculate_total(result) -> float:
    """
    Sum of allocation amounts for a ValueResult.
    ConditionalResult (or anything else) totals 0.0.
    """
    if isinstance(result, ValueResult):
        total = 0.0
        for allocation in result.allocations:
            total += allocation.amount
        return total

    logger.debug("No allocations in %s, total is 0.0", type(result).__name__)
    return 0.0
