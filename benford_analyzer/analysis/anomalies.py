from dataclasses import dataclass
from typing import FrozenSet, List, Mapping, Optional, Sequence

from .reference import benford_reference

DEFAULT_THRESHOLD = 5.0


@dataclass(frozen=True)
class DigitResult:
    digit: int
    count: int
    observed_pct: float
    expected_pct: float
    difference_pct: float
    is_anomaly: bool


def resolve_threshold(threshold, default: float = DEFAULT_THRESHOLD) -> float:
    """Threshold in percentage points; falls back to the default when missing or non-numeric."""
    if threshold is None or isinstance(threshold, bool):
        return default
    try:
        value = float(threshold)
    except (TypeError, ValueError):
        return default
    # NaN compares false against everything, which would silence detection
    if value != value:
        return default
    return value


def build_digit_results(
    histogram: Mapping[int, int],
    valid_count: int,
    threshold: float,
    expected: Optional[Mapping[int, float]] = None,
) -> List[DigitResult]:
    """Per-digit observed/expected comparison, digits 1-9 in order."""
    expected = expected or benford_reference()
    results = []
    for digit in range(1, 10):
        count = int(histogram.get(digit, 0))
        observed = count / valid_count * 100 if valid_count else 0.0
        difference = abs(observed - expected[digit])
        results.append(
            DigitResult(
                digit=digit,
                count=count,
                observed_pct=observed,
                expected_pct=expected[digit],
                difference_pct=difference,
                is_anomaly=difference > threshold,
            )
        )
    return results


def detect_anomalies(results: Sequence[DigitResult], threshold: float) -> FrozenSet[int]:
    """Digits whose |observed - expected| strictly exceeds the threshold."""
    return frozenset(
        r.digit for r in results
        if abs(r.observed_pct - r.expected_pct) > threshold
    )


def anomaly_message(anomalies: FrozenSet[int], threshold: float) -> Optional[str]:
    if not anomalies:
        return None
    digits = ", ".join(str(d) for d in sorted(anomalies))
    return (
        f"Digits {digits} deviate by more than {threshold:g}% "
        f"from Benford's Law expected distribution."
    )
