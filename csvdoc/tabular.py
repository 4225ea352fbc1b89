"""
Delimiter-sensitive tabular parsing.

Text is split with the csv module in strict mode, so unterminated or
misplaced quotes surface as ParseError instead of silently producing
shifted columns.
"""

from __future__ import annotations

import csv
import io
from typing import List

from .errors import ParseError
from .models import Record
from .rules import BOM, DEFAULT_DELIMITER, SYNTHETIC_COLUMN_PREFIX, TAB_DELIMITER


def detect_delimiter(text: str) -> str:
    """Tab if the first line holds a tab, comma otherwise."""
    first_line = text.split("\n", 1)[0]
    return TAB_DELIMITER if TAB_DELIMITER in first_line else DEFAULT_DELIMITER


def _is_blank(row: List[str]) -> bool:
    return not any(cell.strip() for cell in row)


def _column_key(header: List[str], index: int) -> str:
    name = header[index].strip() if index < len(header) else ""
    return name or f"{SYNTHETIC_COLUMN_PREFIX}{index + 1}"


def split_rows(text: str, delimiter: str) -> List[List[str]]:
    # no single cell can be longer than the whole text
    if len(text) > csv.field_size_limit():
        csv.field_size_limit(len(text))
    reader = csv.reader(io.StringIO(text, newline=""), delimiter=delimiter, strict=True)
    try:
        return list(reader)
    except csv.Error as exc:
        raise ParseError(f"Malformed tabular data: {exc}") from exc


def parse_records(text: str) -> List[Record]:
    text = text.strip()
    if text.startswith(BOM):
        text = text[len(BOM):]
    if not text:
        return []

    rows = split_rows(text, detect_delimiter(text))
    if len(rows) < 2:
        return []

    header = rows[0]
    data = [row for row in rows[1:] if not _is_blank(row)]
    # every record of a file gets the same columns
    width = max([len(header)] + [len(row) for row in data])

    records: List[Record] = []
    for row in data:
        record: Record = {}
        for i in range(width):
            # later duplicates of a header name overwrite earlier ones
            record[_column_key(header, i)] = row[i].strip() if i < len(row) else ""
        records.append(record)
    return records
