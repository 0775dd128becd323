"""
Abstract base classes for rules and calculators.

Input: Table
Output: CalculationResult (ValueResult or ConditionalResult)
"""

import logging
from abc import ABC, abstractmethod

from ..results import CalculationResult
from ..table import Table
from ..totals import calculate_total

logger = logging.getLogger(__name__)


class BaseCalculator(ABC):
    """All calculators inherit from this."""

    @abstractmethod
    def calculate(self, table: Table) -> CalculationResult:
        """
        Reads the table's columns.
        Returns a CalculationResult. Must not modify the table.
        """
        pass


class BaseRule(ABC):
    """A rule manufactures the calculator that applies it."""

    name = ""

    @abstractmethod
    def create_calculator(self) -> BaseCalculator:
        """Returns a newly constructed calculator."""
        pass


def run_rule(rule: BaseRule, table: Table) -> float:
    """Build the rule's calculator, run it over the table, return the total."""
    calculator = rule.create_calculator()
    result = calculator.calculate(table)
    total = calculate_total(result)
    logger.info("Rule %s over %d rows → total %s", rule.name or type(rule).__name__,
                len(table), total)
    return total
