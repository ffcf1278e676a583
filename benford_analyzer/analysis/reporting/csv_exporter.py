import csv
from io import StringIO
from typing import Dict, Iterable, List, Union

from benford_analyzer.analysis.orchestrator import AnalysisOutcome

EXPORT_HEADER = ["Digit", "Count", "Observed %", "Expected %", "Difference %"]
GENERATED_HEADER = ["Number"]


class CSVExporter:
    def export(self, outcome: AnalysisOutcome) -> str:
        output = StringIO()
        writer = csv.writer(output, lineterminator="\n")

        writer.writerow(EXPORT_HEADER)
        for result in outcome.results:
            writer.writerow([
                result.digit,
                result.count,
                f"{result.observed_pct:.1f}",
                f"{result.expected_pct:.1f}",
                f"{result.difference_pct:.1f}",
            ])

        return output.getvalue()

    def generated_to_csv(self, values: Iterable[str]) -> str:
        output = StringIO()
        writer = csv.writer(output, lineterminator="\n")

        writer.writerow(GENERATED_HEADER)
        for value in values:
            writer.writerow([value])

        return output.getvalue()


def parse_export_csv(content: str) -> List[Dict[str, Union[int, float]]]:
    """Read a digit table written by CSVExporter.export back into rows."""
    reader = csv.DictReader(StringIO(content))
    if reader.fieldnames != EXPORT_HEADER:
        raise ValueError(f"Unexpected header: {reader.fieldnames}")

    rows = []
    for row in reader:
        rows.append({
            "digit": int(row["Digit"]),
            "count": int(row["Count"]),
            "observed": float(row["Observed %"]),
            "expected": float(row["Expected %"]),
            "difference": float(row["Difference %"]),
        })
    return rows
