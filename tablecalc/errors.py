"""
Table errors.

Bad lookups and short columns are raised to the caller rather than
aborting the process.
"""


class TableError(Exception):
    """Base class for table failures."""


class ColumnNotFoundError(TableError, KeyError):
    """Raised when a column name has no match in the table."""

    def __init__(self, name: str, available: list):
        self.name = name
        self.available = list(available)
        super().__init__(name)

    def __str__(self) -> str:
        return f"Column not found: {self.name}. Available: {self.available}"


class RowCountMismatchError(TableError, ValueError):
    """Raised when a column is shorter than the table's declared size."""

    def __init__(self, name: str, expected: int, actual: int):
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Column '{name}' has {actual} rows, table expects at least {expected}"
        )


class ColumnLengthMismatchError(TableError, ValueError):
    """Raised by strict zips when the two columns differ in length."""

    def __init__(self, first: str, first_len: int, second: str, second_len: int):
        self.first = first
        self.second = second
        super().__init__(
            f"Cannot zip '{first}' ({first_len} rows) with "
            f"'{second}' ({second_len} rows)"
        )


class RuleNotFoundError(ValueError):
    """Raised when no rule is registered under a name."""
