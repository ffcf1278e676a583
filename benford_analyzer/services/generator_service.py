from typing import List, Optional

import numpy as np

from benford_analyzer.config import settings
from benford_analyzer.analysis.generator import BenfordGenerator
from benford_analyzer.schemas.generator import GenerateRequest, GenerateResponse


class GeneratorService:
    def __init__(self, rng: Optional[np.random.Generator] = None):
        self.rng = rng

    def generate(self, request: GenerateRequest) -> GenerateResponse:
        count = settings.default_record_count if request.count is None else request.count
        rng = self.rng if self.rng is not None else np.random.default_rng(request.seed)

        generator = BenfordGenerator(
            rng=rng,
            min_count=settings.min_record_count,
            max_count=settings.max_record_count,
        )
        values = generator.generate(count, request.number_format, request.uniform_mix)

        return GenerateResponse(count=len(values), number_format=request.number_format, values=values)

    def export_to_csv(self, values: List[str]) -> str:
        from benford_analyzer.analysis.reporting.csv_exporter import CSVExporter

        exporter = CSVExporter()
        return exporter.generated_to_csv(values)
