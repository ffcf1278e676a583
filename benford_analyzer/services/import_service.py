import csv
import logging
from typing import List

from benford_analyzer.analysis.digits import normalize
from benford_analyzer.analysis.errors import (
    ColumnSelectionError,
    InputEmptyError,
    InputEncodingError,
    NoValidNumbersError,
)
from benford_analyzer.schemas.import_schema import ColumnsResponse, ExtractResponse

logger = logging.getLogger(__name__)

PREVIEW_LENGTH = 30


def split_csv_line(line: str) -> List[str]:
    """Comma split that respects double quotes; fields are trimmed."""
    row = next(csv.reader([line], skipinitialspace=True), [])
    return [field.strip() for field in row] or [""]


def decode_upload(content: bytes) -> str:
    try:
        return content.decode("utf-8")
    except UnicodeDecodeError:
        raise InputEncodingError("CSV file must be UTF-8 encoded text")


def _lines(content: str) -> List[str]:
    # Remove UTF-8 BOM if present
    if content.startswith("\ufeff"):
        content = content[1:]
    content = content.strip()
    if not content:
        raise InputEmptyError("Empty CSV file")
    return content.splitlines()


class ImportService:
    def list_columns(self, content: str) -> ColumnsResponse:
        lines = _lines(content)
        columns = split_csv_line(lines[0])
        labels = [
            f"Column {i + 1}: {col[:PREVIEW_LENGTH]}{'...' if len(col) > PREVIEW_LENGTH else ''}"
            for i, col in enumerate(columns)
        ]
        return ColumnsResponse(columns=columns, labels=labels, multi_column=len(columns) > 1)

    def extract_column(self, content: str, column: int) -> ExtractResponse:
        if column < 0:
            raise ColumnSelectionError("Column index must be zero or positive")

        lines = _lines(content)
        numbers = []
        rejected = 0
        for line in lines:
            fields = split_csv_line(line)
            value = normalize(fields[column]) if column < len(fields) else None
            if value is None:
                rejected += 1
                continue
            numbers.append(value)

        if not numbers:
            raise NoValidNumbersError("No valid numbers found in selected column")

        logger.info("Loaded %d numbers from CSV column %d (%d rows rejected)", len(numbers), column, rejected)
        return ExtractResponse(
            column=column,
            total_rows=len(lines),
            valid_numbers=len(numbers),
            rejected_rows=rejected,
            numbers=numbers,
            text="\n".join(_format_number(n) for n in numbers),
        )


def _format_number(value: float) -> str:
    return str(int(value)) if value.is_integer() else repr(value)
