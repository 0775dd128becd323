"""
Calculation endpoints. Run a registered rule over a posted table.
"""

import logging
import math

from fastapi import APIRouter, HTTPException

from .. import schemas
from ..calculators.base import run_rule
from ..calculators.registry import get_rule, list_rules
from ..calculators.simple import SampleRule
from ..errors import ColumnLengthMismatchError, ColumnNotFoundError, RowCountMismatchError, RuleNotFoundError
from ..results import ValueResult
from ..table import Table
from ..totals import calculate_total

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/calculations", tags=["calculations"])


def _build_table(request: schemas.CalculationRequest) -> Table:
    """Table from posted columns. Size defaults to the shortest column."""
    size = request.size
    if size is None:
        size = min((len(v) for v in request.columns.values()), default=0)
    table = Table(size)
    for name, data in request.columns.items():
        table.define_column_f64(name, data)
    return table


@router.get("/rules", response_model=schemas.RuleList)
def rules():
    return {"rules": list_rules()}


@router.get("/sample", response_model=schemas.SampleResponse)
def sample():
    """Run the sample rule over the built-in sample table."""
    table = Table.sample()
    total = run_rule(SampleRule(), table)
    return {"rule": SampleRule.name, "row_count": len(table), "total": total}


@router.post("/{rule_name}", response_model=schemas.CalculationResponse)
def calculate(rule_name: str, request: schemas.CalculationRequest):
    try:
        rule = get_rule(rule_name)
    except RuleNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    try:
        table = _build_table(request)
        result = rule.create_calculator().calculate(table)
    except ColumnNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except (RowCountMismatchError, ColumnLengthMismatchError, ValueError) as e:
        raise HTTPException(status_code=422, detail=str(e))

    total = calculate_total(result)
    amounts = result.amounts() if isinstance(result, ValueResult) else []
    if not math.isfinite(total) or not all(math.isfinite(a) for a in amounts):
        raise HTTPException(status_code=422, detail="Allocation overflowed to a non-finite value")
    logger.info("Calculated %s over %d rows: total=%s", rule_name, len(table), total)
    return {
        "rule": rule_name,
        "row_count": len(table),
        "allocations": amounts,
        "total": total,
    }
