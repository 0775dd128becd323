from pydantic import BaseModel
from typing import Optional, List, Dict

class CalculationRequest(BaseModel):
    size: Optional[int] = None
    columns: Dict[str, List[float]] = {}

class CalculationResponse(BaseModel):
    rule: str
    row_count: int
    allocations: List[float] = []
    total: float

class SampleResponse(BaseModel):
    rule: str
    row_count: int
    total: float

class RuleList(BaseModel):
    rules: List[str]
