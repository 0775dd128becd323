"""
tablecalc: named float columns, allocation rules, totals.

Table holds the columns. A rule builds a calculator, the calculator turns
the table into allocations, calculate_total reduces them to one number.
"""

from .results import Allocation, CalculationResult, ConditionalResult, ValueResult
from .table import Column, Table
from .totals import calculate_total

__all__ = [
    "Allocation",
    "CalculationResult",
    "Column",
    "ConditionalResult",
    "Table",
    "ValueResult",
    "calculate_total",
]
