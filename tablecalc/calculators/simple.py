"""
Quantity × price allocation.

Each row allocates quantity × price × rate (default rate 0.07).
Column names and rate come from settings unless passed explicitly.
"""

from typing import Optional

from ..config import settings
from ..results import ValueResult
from ..table import Table
from .base import BaseCalculator, BaseRule


class SimpleCalculator(BaseCalculator):

    def __init__(self, first_column: Optional[str] = None,
                 second_column: Optional[str] = None,
                 rate: Optional[float] = None):
        self.first_column = settings.QUANTITY_COLUMN if first_column is None else first_column
        self.second_column = settings.PRICE_COLUMN if second_column is None else second_column
        self.rate = settings.ALLOCATION_RATE if rate is None else rate

    def calculate(self, table: Table) -> ValueResult:
        allocations = table.zip_columns(self.first_column, self.second_column, self.rate)
        return ValueResult(allocations)


class SampleRule(BaseRule):
    """Allocates a fixed rate of quantity × price on every row."""

    name = "sample"

    def __init__(self, first_column: Optional[str] = None,
                 second_column: Optional[str] = None,
                 rate: Optional[float] = None):
        self.first_column = first_column
        self.second_column = second_column
        self.rate = rate

    def create_calculator(self) -> SimpleCalculator:
        return SimpleCalculator(self.first_column, self.second_column, self.rate)
