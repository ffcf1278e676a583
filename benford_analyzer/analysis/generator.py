"""
Synthetic Benford-distributed data.

Leading digits are drawn by inverse-transform sampling over the cumulative
Benford distribution; up to six uniformly random trailing digits give each
value its magnitude. The entropy source is an injectable numpy Generator
so runs can be reproduced from a seed.
"""

import logging
from enum import Enum
from typing import List, Optional, Union

import numpy as np

from .errors import GenerationRangeError
from .reference import benford_probabilities

logger = logging.getLogger(__name__)

MIN_RECORD_COUNT = 10
MAX_RECORD_COUNT = 10000
TRAILING_DIGITS_UPPER = 1_000_000  # exclusive, trailing part is 0..999999


class NumberFormat(str, Enum):
    INTEGER = "integer"
    CURRENCY = "currency"
    DECIMAL = "decimal"


class BenfordGenerator:
    """
    Benford-conforming number generator.

    Usage:
        generator = BenfordGenerator(seed=42)
        values = generator.generate(500, "currency")
    """

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
        min_count: int = MIN_RECORD_COUNT,
        max_count: int = MAX_RECORD_COUNT,
    ):
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.min_count = min_count
        self.max_count = max_count

    def digit_distribution(self, uniform_mix: float = 0.0) -> np.ndarray:
        """Sampling probabilities for digits 1-9, optionally blended toward uniform."""
        if not 0.0 <= uniform_mix <= 1.0:
            raise GenerationRangeError("Uniform mix must be between 0 and 1")
        return (1 - uniform_mix) * benford_probabilities() + uniform_mix / 9

    def sample_digit(self, r: float, cumulative: np.ndarray) -> int:
        """First digit whose cumulative mass reaches r."""
        for digit, mass in enumerate(cumulative, start=1):
            if r <= mass:
                return digit
        # Cumulative mass can land a hair under 1.0
        return 9

    def generate_values(self, count: int, number_format: Union[str, NumberFormat] = NumberFormat.INTEGER,
                        uniform_mix: float = 0.0) -> List[Union[int, float]]:
        self._validate_count(count)
        number_format = self._resolve_format(number_format)
        cumulative = np.cumsum(self.digit_distribution(uniform_mix))

        values = []
        for _ in range(count):
            digit = self.sample_digit(float(self.rng.random()), cumulative)
            trailing = int(self.rng.integers(0, TRAILING_DIGITS_UPPER))
            number = int(f"{digit}{trailing}")

            if number_format in (NumberFormat.CURRENCY, NumberFormat.DECIMAL):
                values.append(number / 100)
            else:
                values.append(number)

        logger.info("Generated %d %s values", count, number_format.value)
        return values

    def generate(self, count: int, number_format: Union[str, NumberFormat] = NumberFormat.INTEGER,
                 uniform_mix: float = 0.0) -> List[str]:
        """Generate `count` values formatted as text tokens."""
        number_format = self._resolve_format(number_format)
        values = self.generate_values(count, number_format, uniform_mix)
        return [format_value(v, number_format) for v in values]

    def _validate_count(self, count: int):
        if isinstance(count, bool) or not isinstance(count, (int, np.integer)):
            raise GenerationRangeError("Number of records must be an integer")
        if count < self.min_count or count > self.max_count:
            raise GenerationRangeError(
                f"Number of records must be between {self.min_count:,} and {self.max_count:,}"
            )

    @staticmethod
    def _resolve_format(number_format) -> NumberFormat:
        if number_format is None:
            return NumberFormat.INTEGER
        try:
            return NumberFormat(number_format)
        except ValueError:
            raise GenerationRangeError(f"Unknown number format: {number_format}")


def format_value(value: Union[int, float], number_format: Union[str, NumberFormat]) -> str:
    """Two fixed decimals for currency/decimal, plain integer text otherwise."""
    if NumberFormat(number_format) in (NumberFormat.CURRENCY, NumberFormat.DECIMAL):
        return f"{value:.2f}"
    return str(int(value))


def generate(count: int, number_format: Union[str, NumberFormat] = NumberFormat.INTEGER,
             rng: Optional[np.random.Generator] = None, uniform_mix: float = 0.0) -> List[str]:
    return BenfordGenerator(rng=rng).generate(count, number_format, uniform_mix)
