"""
Benford's Law analysis engine.

Pipeline: tokenize -> normalize -> leading digit -> histogram ->
chi-squared + MAD tests + anomaly detection -> AnalysisOutcome.
"""

from .digits import tokenize, normalize, leading_digit, aggregate
from .reference import BENFORD_EXPECTED, benford_reference
from .benford_tests import ChiSquaredResult, MADResult, chi_squared, mad
from .anomalies import DigitResult, detect_anomalies, resolve_threshold
from .generator import BenfordGenerator, NumberFormat, generate
from .orchestrator import AnalysisOutcome, AnalysisSession, analyze

__all__ = [
    'tokenize',
    'normalize',
    'leading_digit',
    'aggregate',
    'BENFORD_EXPECTED',
    'benford_reference',
    'ChiSquaredResult',
    'MADResult',
    'chi_squared',
    'mad',
    'DigitResult',
    'detect_anomalies',
    'resolve_threshold',
    'BenfordGenerator',
    'NumberFormat',
    'generate',
    'AnalysisOutcome',
    'AnalysisSession',
    'analyze',
]
