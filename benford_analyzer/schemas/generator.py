from typing import Optional, List, Literal
from pydantic import BaseModel, Field


class GenerateRequest(BaseModel):
    count: Optional[int] = None
    number_format: Literal["integer", "currency", "decimal"] = "integer"
    seed: Optional[int] = None
    uniform_mix: float = Field(default=0.0, ge=0.0, le=1.0)


class GenerateResponse(BaseModel):
    count: int
    number_format: str
    values: List[str]
