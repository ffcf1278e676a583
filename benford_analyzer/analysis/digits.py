"""
Input normalization, leading-digit extraction and digit frequency aggregation.
"""

import logging
import math
import numbers
import re
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np
import pandas as pd

from .errors import InputEmptyError, NoAnalyzableDataError

logger = logging.getLogger(__name__)

DIGITS = tuple(range(1, 10))

# Currency symbol, thousands separator, percent sign and any whitespace
_STRIP_PATTERN = re.compile(r"[$,%\s]")
_TOKEN_SPLIT_PATTERN = re.compile(r"[,\t\n]+")
# Plain ASCII decimal or exponent notation; no underscores, no non-ASCII digits
_NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def tokenize(raw: str) -> List[str]:
    """Split free-form delimited text on commas, tabs and newlines."""
    if raw is None or not raw.strip():
        raise InputEmptyError("Please provide data to analyze")
    tokens = [t.strip() for t in _TOKEN_SPLIT_PATTERN.split(raw.strip())]
    return [t for t in tokens if t]


def normalize(raw) -> Optional[float]:
    """
    Turn a raw token into a strictly positive float.

    Returns None for anything that is not a finite number greater than zero.
    Rejection is a normal outcome and never raises.
    """
    if raw is None:
        return None
    cleaned = _STRIP_PATTERN.sub("", str(raw))
    if not _NUMBER_PATTERN.fullmatch(cleaned):
        return None
    value = float(cleaned)
    if not math.isfinite(value) or value <= 0:
        return None
    return value


def normalize_tokens(tokens: Iterable[str]) -> Tuple[List[float], int]:
    """Normalize every token; returns (accepted values, rejected count)."""
    accepted = []
    rejected = 0
    for token in tokens:
        value = normalize(token)
        if value is None:
            rejected += 1
            continue
        accepted.append(value)
    if rejected:
        logger.debug("Rejected %d unparseable or non-positive tokens", rejected)
    return accepted, rejected


def leading_digit(value) -> Optional[int]:
    """
    Return the first significant digit (1-9) of |value|, or None.

    Floats are rendered with the shortest round-trip scientific
    representation, so the first mantissa character is the leading digit
    for any magnitude (1e21, 1e-7, subnormals) and 0.3 reads as 3 rather
    than as the 2.999... of its binary expansion. Integers are read
    from their exact decimal text, whatever their size.
    """
    try:
        if isinstance(value, bool):
            return None
        if isinstance(value, numbers.Integral):
            text = str(abs(int(value)))
        else:
            magnitude = abs(float(value))
            if not math.isfinite(magnitude) or magnitude == 0:
                return None
            text = np.format_float_scientific(magnitude, unique=True)
    except (TypeError, ValueError, OverflowError):
        return None

    text = text.lstrip("0.")
    if text and text[0] in "123456789":
        return int(text[0])
    return None


def aggregate(values: Iterable) -> Tuple[Dict[int, int], int]:
    """
    Build the leading-digit histogram.

    All nine bins are always present. Values without a leading digit are
    excluded from the valid count.

    Raises:
        NoAnalyzableDataError: if no value yields a leading digit
    """
    digits = [d for d in (leading_digit(v) for v in values) if d is not None]
    valid_count = len(digits)

    if valid_count == 0:
        raise NoAnalyzableDataError("No valid first digits found")

    counts = pd.Series(digits, dtype="int64").value_counts().reindex(DIGITS, fill_value=0)
    histogram = {int(d): int(counts.loc[d]) for d in DIGITS}
    return histogram, valid_count
