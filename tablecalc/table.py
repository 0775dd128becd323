"""
In-memory table of named float columns.

Columns are appended once and never changed. Every column holds at least
`size` rows; lookups are by name, first match wins.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .config import settings
from .errors import ColumnLengthMismatchError, ColumnNotFoundError, RowCountMismatchError
from .results import Allocation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Column:
    name: str
    data: Tuple[float, ...]

    def __len__(self) -> int:
        return len(self.data)


class Table:
    """Ordered collection of named float columns with a declared row count."""

    def __init__(self, size: int):
        if isinstance(size, bool) or not isinstance(size, int) or size < 0:
            raise ValueError(f"Table size must be a non-negative int, got {size!r}")
        self.size = size
        self._columns: List[Column] = []

    @classmethod
    def sample(cls, rows: Optional[int] = None, quantity: Optional[float] = None,
               price: Optional[float] = None) -> "Table":
        """
        Table pre-populated with constant "quantity" and "price" columns.
        Defaults: 10000 rows of quantity 100.0 and price 1.0.
        """
        rows = settings.SAMPLE_ROWS if rows is None else rows
        quantity = settings.SAMPLE_QUANTITY if quantity is None else quantity
        price = settings.SAMPLE_PRICE if price is None else price

        table = cls(rows)
        table.define_column_f64(settings.QUANTITY_COLUMN, [quantity] * rows)
        table.define_column_f64(settings.PRICE_COLUMN, [price] * rows)
        return table

    def __len__(self) -> int:
        return self.size

    def __contains__(self, name) -> bool:
        return any(c.name == name for c in self._columns)

    def __repr__(self) -> str:
        return f"Table(size={self.size}, columns={self.column_names})"

    @property
    def column_names(self) -> List[str]:
        return [c.name for c in self._columns]

    def define_column_f64(self, name: str, data: Iterable[float]) -> "Table":
        """
        Append a column. Data must have at least `size` values. A shorter
        column raises RowCountMismatchError. Returns self for chaining.
        """
        values = tuple(float(v) for v in data)
        if len(values) < self.size:
            raise RowCountMismatchError(name, self.size, len(values))

        self._columns.append(Column(name=name, data=values))
        logger.debug("Defined column %s (%d rows)", name, len(values))
        return self

    def column(self, name: str) -> Column:
        for col in self._columns:
            if col.name == name:
                return col
        raise ColumnNotFoundError(name, self.column_names)

    def zip_columns(self, first: str, second: str, rate: Optional[float] = None,
                    strict: Optional[bool] = None) -> List[Allocation]:
        """
        Pair two columns row by row and allocate first × second × rate.

        Columns of different length are truncated to the shorter one unless
        strict is set, in which case ColumnLengthMismatchError is raised.
        """
        rate = settings.ALLOCATION_RATE if rate is None else rate
        strict = settings.STRICT_COLUMN_LENGTHS if strict is None else strict

        c1 = self.column(first)
        c2 = self.column(second)

        if len(c1) != len(c2):
            if strict:
                raise ColumnLengthMismatchError(first, len(c1), second, len(c2))
            logger.warning(
                "Zipping %s (%d rows) with %s (%d rows), truncating to %d",
                first, len(c1), second, len(c2), min(len(c1), len(c2)),
            )

        market_values = (a * b for a, b in zip(c1.data, c2.data))
        return [Allocation(value * rate) for value in market_values]
