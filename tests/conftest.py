"""
Shared test fixtures: sample tables and API test client.
"""

import os
import pytest
from fastapi.testclient import TestClient

# Pin settings before importing app modules
os.environ["ALLOCATION_RATE"] = "0.07"
os.environ["STRICT_COLUMN_LENGTHS"] = "false"

from tablecalc.main import app
from tablecalc.table import Table


def make_table(rows, quantity, price):
    """Variant A table: declared size, then quantity and price columns."""
    table = Table(rows)
    table.define_column_f64("quantity", [quantity] * rows)
    table.define_column_f64("price", [price] * rows)
    return table


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def sample_table():
    """10,000 rows, quantity 100.0, price 1.0."""
    return make_table(10000, 100.0, 1.0)
