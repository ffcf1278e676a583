import pytest

from benford_analyzer.analysis.orchestrator import analyze, analyze_values
from benford_analyzer.analysis.reporting.csv_exporter import CSVExporter, parse_export_csv


def test_export_header_and_rows():
    content = CSVExporter().export(analyze("123,45,6,7,89"))
    lines = content.strip().split("\n")

    assert lines[0] == "Digit,Count,Observed %,Expected %,Difference %"
    assert len(lines) == 10
    assert lines[1] == "1,1,20.0,30.1,10.1"
    assert lines[2] == "2,0,0.0,17.6,17.6"


def test_export_round_trip(benford_values):
    outcome = analyze_values(benford_values)
    rows = parse_export_csv(CSVExporter().export(outcome))

    assert [row["digit"] for row in rows] == list(range(1, 10))
    for row, result in zip(rows, outcome.results):
        assert row["count"] == result.count
        assert row["observed"] == pytest.approx(result.observed_pct, abs=0.05)
        assert row["expected"] == pytest.approx(result.expected_pct, abs=0.05)
        assert row["difference"] == pytest.approx(result.difference_pct, abs=0.05)


def test_parse_rejects_foreign_csv():
    with pytest.raises(ValueError):
        parse_export_csv("a,b\n1,2\n")


def test_generated_to_csv():
    content = CSVExporter().generated_to_csv(["12.50", "3.40"])
    assert content == "Number\n12.50\n3.40\n"
