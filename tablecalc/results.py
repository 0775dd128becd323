"""
Calculation results.

A calculator returns one of two shapes:
  ValueResult        one Allocation per table row
  ConditionalResult  no data, reserved for rules whose outcome depends on
                     a condition. Nothing produces it yet.
"""

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class Allocation:
    """A single computed amount for one row."""
    amount: float


@dataclass(frozen=True)
class ValueResult:
    allocations: Tuple[Allocation, ...] = ()

    def __post_init__(self):
        # Accept any iterable, store as a tuple
        object.__setattr__(self, "allocations", tuple(self.allocations))

    def __len__(self) -> int:
        return len(self.allocations)

    def amounts(self) -> list:
        return [a.amount for a in self.allocations]


@dataclass(frozen=True)
class ConditionalResult:
    pass


CalculationResult = Union[ValueResult, ConditionalResult]
