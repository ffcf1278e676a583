from typing import List
from pydantic import BaseModel


class ColumnsResponse(BaseModel):
    columns: List[str]
    labels: List[str]
    multi_column: bool


class ExtractResponse(BaseModel):
    column: int
    total_rows: int
    valid_numbers: int
    rejected_rows: int
    numbers: List[float]
    text: str
