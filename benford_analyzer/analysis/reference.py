"""
Theoretical Benford first-digit distribution.

P(d) = log10(1 + 1/d), expressed here in percent. The table is computed
once at import time and exposed read-only, so it can be shared by any
number of concurrent analyses.
"""

from types import MappingProxyType
from typing import Mapping

import numpy as np

_DIGITS = np.arange(1, 10)

BENFORD_EXPECTED: Mapping[int, float] = MappingProxyType(
    {int(d): float(p) for d, p in zip(_DIGITS, np.log10(1 + 1 / _DIGITS) * 100)}
)


def benford_reference() -> Mapping[int, float]:
    """Expected percentage per leading digit 1-9."""
    return BENFORD_EXPECTED


def benford_probabilities() -> np.ndarray:
    """Expected proportions for digits 1-9 as an array summing to 1."""
    return np.array([BENFORD_EXPECTED[d] for d in range(1, 10)]) / 100
