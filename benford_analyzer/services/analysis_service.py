from typing import Optional

from benford_analyzer.config import settings
from benford_analyzer.analysis.orchestrator import AnalysisOutcome, analyze
from benford_analyzer.schemas.analysis import AnalysisResponse


class AnalysisService:
    def __init__(self, default_threshold: Optional[float] = None, min_sample_size: Optional[int] = None):
        self.default_threshold = (
            settings.default_threshold if default_threshold is None else default_threshold
        )
        self.min_sample_size = settings.min_sample_size if min_sample_size is None else min_sample_size

    def run_analysis(self, raw_input: str, threshold: Optional[float] = None) -> AnalysisOutcome:
        if threshold is None:
            threshold = self.default_threshold
        return analyze(raw_input, threshold, min_sample_size=self.min_sample_size)

    def to_response(self, outcome: AnalysisOutcome) -> AnalysisResponse:
        return AnalysisResponse(**outcome.to_dict(), code_version=settings.code_version)

    def export_to_csv(self, outcome: AnalysisOutcome) -> str:
        from benford_analyzer.analysis.reporting.csv_exporter import CSVExporter

        exporter = CSVExporter()
        return exporter.export(outcome)
