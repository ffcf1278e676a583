from dataclasses import dataclass
from typing import Dict, List, Sequence

import numpy as np

from .anomalies import DigitResult


@dataclass(frozen=True)
class AdvancedMetrics:
    max_deviation: float
    average_deviation: float
    conformity_score: float
    heatmap: Dict[int, float]
    cumulative_observed: List[float]
    cumulative_expected: List[float]


class MetricsCalculator:
    def __init__(self, results: Sequence[DigitResult]):
        self.results = list(results)
        self.deviations = np.array([abs(r.difference_pct) for r in self.results], dtype=float)

    def calculate_all(self) -> AdvancedMetrics:
        return AdvancedMetrics(
            max_deviation=self._max_deviation(),
            average_deviation=self._average_deviation(),
            conformity_score=self._conformity_score(),
            heatmap=self._heatmap(),
            cumulative_observed=self._cumulative("observed_pct"),
            cumulative_expected=self._cumulative("expected_pct"),
        )

    def _max_deviation(self) -> float:
        return float(self.deviations.max()) if self.deviations.size else 0.0

    def _average_deviation(self) -> float:
        return float(self.deviations.mean()) if self.deviations.size else 0.0

    def _conformity_score(self) -> float:
        # 100 for a perfect match, minus 10 points per percentage point of mean deviation
        return max(0.0, 100.0 - self._average_deviation() * 10)

    def _heatmap(self) -> Dict[int, float]:
        max_dev = self._max_deviation()
        if max_dev == 0:
            return {r.digit: 0.0 for r in self.results}
        return {
            r.digit: float(dev / max_dev)
            for r, dev in zip(self.results, self.deviations)
        }

    def _cumulative(self, attribute: str) -> List[float]:
        series = np.array([getattr(r, attribute) for r in self.results], dtype=float)
        return np.cumsum(series).tolist()
