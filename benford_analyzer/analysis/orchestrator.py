import logging
from dataclasses import dataclass, field, replace
from typing import Any, Dict, FrozenSet, List, Optional, Tuple, Union

import numpy as np

from .anomalies import (
    DigitResult,
    anomaly_message,
    build_digit_results,
    detect_anomalies,
    resolve_threshold,
)
from .benford_tests import ChiSquaredResult, MADResult, chi_squared, mad
from .digits import aggregate, normalize_tokens, tokenize
from .errors import NoValidNumbersError
from .generator import BenfordGenerator, NumberFormat
from .metrics import AdvancedMetrics, MetricsCalculator
from .reference import benford_reference

logger = logging.getLogger(__name__)

MIN_SAMPLE_SIZE = 10
SMALL_SAMPLE_WARNING = "Small sample size may not follow Benford's Law reliably"


@dataclass(frozen=True)
class AnalysisOutcome:
    """Everything one analysis run produces. Never updated in place."""
    results: Tuple[DigitResult, ...]
    total: int
    anomalies: FrozenSet[int]
    threshold: float
    chi_squared: ChiSquaredResult
    mad: MADResult
    metrics: AdvancedMetrics
    parsed_count: int = 0
    rejected_count: int = 0
    warnings: Tuple[str, ...] = ()

    @property
    def has_anomalies(self) -> bool:
        return bool(self.anomalies)

    @property
    def anomaly_message(self) -> Optional[str]:
        return anomaly_message(self.anomalies, self.threshold)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "results": [
                {
                    "digit": r.digit,
                    "count": r.count,
                    "observed": r.observed_pct,
                    "expected": r.expected_pct,
                    "difference": r.difference_pct,
                    "is_anomaly": r.is_anomaly,
                }
                for r in self.results
            ],
            "total": self.total,
            "parsed_count": self.parsed_count,
            "rejected_count": self.rejected_count,
            "has_anomalies": self.has_anomalies,
            "anomalies": sorted(self.anomalies),
            "anomaly_message": self.anomaly_message,
            "threshold": self.threshold,
            "chi_squared": {
                "statistic": self.chi_squared.statistic,
                "degrees_of_freedom": self.chi_squared.degrees_of_freedom,
                "p_value_band": self.chi_squared.p_value_band,
                "p_value": self.chi_squared.p_value,
                "significance_level": self.chi_squared.significance_level,
                "is_significant": self.chi_squared.is_significant,
                "interpretation": self.chi_squared.interpretation,
            },
            "mad": {
                "value": self.mad.value,
                "conformity": self.mad.conformity,
                "interpretation": self.mad.interpretation,
                "thresholds": dict(self.mad.thresholds),
            },
            "metrics": {
                "max_deviation": self.metrics.max_deviation,
                "average_deviation": self.metrics.average_deviation,
                "conformity_score": self.metrics.conformity_score,
                "heatmap": {str(d): v for d, v in self.metrics.heatmap.items()},
                "cumulative_observed": list(self.metrics.cumulative_observed),
                "cumulative_expected": list(self.metrics.cumulative_expected),
            },
            "warnings": list(self.warnings),
        }


def analyze_values(
    values: List[float],
    threshold=None,
    parsed_count: Optional[int] = None,
    rejected_count: int = 0,
    min_sample_size: int = MIN_SAMPLE_SIZE,
) -> AnalysisOutcome:
    """Run aggregation, both statistical tests and anomaly detection over accepted numbers."""
    if not values:
        raise NoValidNumbersError("No valid numbers found in input")

    threshold = resolve_threshold(threshold)
    warnings = []
    if len(values) < min_sample_size:
        logger.warning("Sample of %d values is below %d", len(values), min_sample_size)
        warnings.append(SMALL_SAMPLE_WARNING)

    histogram, valid_count = aggregate(values)
    expected = benford_reference()
    results = build_digit_results(histogram, valid_count, threshold, expected)

    observed_pct = [r.observed_pct for r in results]
    expected_pct = [r.expected_pct for r in results]

    outcome = AnalysisOutcome(
        results=tuple(results),
        total=valid_count,
        anomalies=detect_anomalies(results, threshold),
        threshold=threshold,
        chi_squared=chi_squared(observed_pct, expected_pct, valid_count),
        mad=mad(observed_pct, expected_pct),
        metrics=MetricsCalculator(results).calculate_all(),
        parsed_count=len(values) if parsed_count is None else parsed_count,
        rejected_count=rejected_count,
        warnings=tuple(warnings),
    )
    logger.info(
        "Analyzed %d values: chi2=%.3f (%s), MAD=%.4f (%s), anomalies=%s",
        outcome.total, outcome.chi_squared.statistic, outcome.chi_squared.p_value_band,
        outcome.mad.value, outcome.mad.conformity, sorted(outcome.anomalies),
    )
    return outcome


def analyze(raw_input: str, threshold=None, min_sample_size: int = MIN_SAMPLE_SIZE) -> AnalysisOutcome:
    """
    Full pipeline over free-form text: tokenize, normalize, aggregate, test, detect.

    Raises:
        InputEmptyError: no text supplied
        NoValidNumbersError: no token survived normalization
        NoAnalyzableDataError: no accepted number yielded a leading digit
    """
    tokens = tokenize(raw_input)
    values, rejected = normalize_tokens(tokens)
    logger.info("Parsed %d tokens: %d accepted, %d rejected", len(tokens), len(values), rejected)
    return analyze_values(
        values,
        threshold=threshold,
        parsed_count=len(values),
        rejected_count=rejected,
        min_sample_size=min_sample_size,
    )


@dataclass(frozen=True)
class AnalysisSession:
    """
    Explicit session state for a caller driving repeated analyses.

    Each operation returns a new session; the previous outcome or generated
    dataset is replaced wholesale.
    """
    threshold: float = 5.0
    outcome: Optional[AnalysisOutcome] = None
    generated: Tuple[str, ...] = field(default_factory=tuple)

    def analyze(self, raw_input: str) -> "AnalysisSession":
        return replace(self, outcome=analyze(raw_input, self.threshold))

    def with_threshold(self, threshold) -> "AnalysisSession":
        return replace(self, threshold=resolve_threshold(threshold))

    def generate(
        self,
        count: int,
        number_format: Union[str, NumberFormat] = NumberFormat.INTEGER,
        rng: Optional[np.random.Generator] = None,
        uniform_mix: float = 0.0,
    ) -> "AnalysisSession":
        values = BenfordGenerator(rng=rng).generate(count, number_format, uniform_mix)
        return replace(self, generated=tuple(values))

    def generated_text(self) -> str:
        return "\n".join(self.generated)

    def clear(self) -> "AnalysisSession":
        return AnalysisSession(threshold=self.threshold)
