from io import BytesIO

import pytest

from benford_analyzer.analysis.errors import (
    ColumnSelectionError,
    InputEmptyError,
    InputEncodingError,
    NoValidNumbersError,
)
from benford_analyzer.services.import_service import ImportService, decode_upload, split_csv_line


def test_split_csv_line_respects_quotes():
    assert split_csv_line('1, "Acme, Inc.","$1,200.50"') == ["1", "Acme, Inc.", "$1,200.50"]
    assert split_csv_line("") == [""]


def test_list_columns(sample_csv):
    result = ImportService().list_columns(sample_csv)
    assert result.columns == ["id", "vendor", "amount"]
    assert result.multi_column is True
    assert result.labels[0] == "Column 1: id"


def test_list_columns_truncates_long_labels():
    result = ImportService().list_columns("x" * 40 + "\n1")
    assert result.labels == ["Column 1: " + "x" * 30 + "..."]
    assert result.multi_column is False


def test_extract_column(sample_csv):
    result = ImportService().extract_column(sample_csv, 2)
    assert result.numbers == [1200.5, 345.0, 9870.0]
    assert result.total_rows == 6
    assert result.valid_numbers == 3
    assert result.rejected_rows == 3
    assert result.text == "1200.5\n345\n9870"


def test_extract_strips_bom():
    result = ImportService().extract_column("\ufeff10\n20\n30", 0)
    assert result.numbers == [10.0, 20.0, 30.0]


def test_extract_errors(sample_csv):
    service = ImportService()
    with pytest.raises(InputEmptyError):
        service.extract_column("", 0)
    with pytest.raises(NoValidNumbersError):
        service.extract_column(sample_csv, 1)
    with pytest.raises(NoValidNumbersError):
        service.extract_column(sample_csv, 7)
    with pytest.raises(ColumnSelectionError):
        service.extract_column(sample_csv, -1)


def test_upload_columns(client, sample_csv):
    response = client.post(
        "/imports/columns",
        files={"file": ("data.csv", BytesIO(sample_csv.encode()), "text/csv")},
    )
    assert response.status_code == 200
    assert response.json()["columns"] == ["id", "vendor", "amount"]


def test_upload_extract_then_analyze(client, sample_csv):
    response = client.post(
        "/imports/extract?column=2",
        files={"file": ("data.csv", BytesIO(sample_csv.encode()), "text/csv")},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["valid_numbers"] == 3

    analysis = client.post("/analyses/run", json={"raw_input": data["text"]})
    assert analysis.status_code == 200
    assert analysis.json()["total"] == 3


def test_upload_empty_file(client):
    response = client.post(
        "/imports/extract?column=0",
        files={"file": ("data.csv", BytesIO(b""), "text/csv")},
    )
    assert response.status_code == 400
    assert response.json()["detail"]["code"] == "input_empty"


def test_decode_upload_rejects_non_utf8():
    assert decode_upload("12,5\n".encode("utf-8")) == "12,5\n"
    with pytest.raises(InputEncodingError):
        decode_upload(b"\xff\xfe1\n\xe92\n")


@pytest.mark.parametrize("path", ["/imports/columns", "/imports/extract?column=0"])
def test_upload_non_utf8_file(client, path):
    response = client.post(
        path,
        files={"file": ("data.csv", BytesIO(b"\xff\xfe1\n\xe92\n"), "text/csv")},
    )
    assert response.status_code == 400
    assert response.json()["detail"]["code"] == "input_encoding"
