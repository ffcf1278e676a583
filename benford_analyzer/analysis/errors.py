"""
Error taxonomy for the Benford analysis engine.

Every failure the engine can report derives from BenfordAnalysisError and
carries a stable ``code`` so callers can render a reason without parsing
the message. Unparseable tokens are not errors: they are counted and
skipped.
"""


class BenfordAnalysisError(ValueError):
    """Base class for caller-facing analysis failures."""

    code = "analysis_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message}


class InputEmptyError(BenfordAnalysisError):
    """No text or data was supplied at all."""

    code = "input_empty"


class NoValidNumbersError(BenfordAnalysisError):
    """Every token failed normalization."""

    code = "no_valid_numbers"


class NoAnalyzableDataError(BenfordAnalysisError):
    """Numbers were accepted but none yielded a leading digit."""

    code = "no_analyzable_data"


class GenerationRangeError(BenfordAnalysisError):
    """Synthetic generation parameters are out of range."""

    code = "generation_range"


class ColumnSelectionError(BenfordAnalysisError):
    code = "column_selection"


class InputEncodingError(BenfordAnalysisError):
    """Uploaded bytes are not UTF-8 text."""

    code = "input_encoding"
