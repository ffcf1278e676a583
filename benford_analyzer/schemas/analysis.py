from typing import Optional, Dict, List
from pydantic import BaseModel, Field


class AnalysisRunRequest(BaseModel):
    raw_input: str
    threshold: Optional[float] = None


class DigitResultResponse(BaseModel):
    digit: int
    count: int
    observed: float
    expected: float
    difference: float
    is_anomaly: bool


class ChiSquaredResponse(BaseModel):
    statistic: float
    degrees_of_freedom: int
    p_value_band: str
    p_value: float
    significance_level: Optional[float]
    is_significant: bool
    interpretation: str


class MADResponse(BaseModel):
    value: float
    conformity: str
    interpretation: str
    thresholds: Dict[str, float]


class MetricsResponse(BaseModel):
    max_deviation: float
    average_deviation: float
    conformity_score: float
    heatmap: Dict[str, float]
    cumulative_observed: List[float]
    cumulative_expected: List[float]


class AnalysisResponse(BaseModel):
    results: List[DigitResultResponse]
    total: int
    parsed_count: int
    rejected_count: int
    has_anomalies: bool
    anomalies: List[int]
    anomaly_message: Optional[str]
    threshold: float
    chi_squared: ChiSquaredResponse
    mad: MADResponse
    metrics: MetricsResponse
    warnings: List[str] = Field(default_factory=list)
    code_version: Optional[str] = None
