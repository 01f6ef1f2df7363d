"""CSV parsing and row validation for person uploads.

A raw row is whatever ``csv.DictReader`` yields for one data line: header
names map to cell strings, short rows carry ``None`` for the missing cells and
surplus cells are collected under the ``None`` key. Only the exact headers
``name``, ``age`` and ``email`` are read; every other column is ignored.
"""
import csv
import io
from collections.abc import Iterable, Mapping
from typing import Any

from csv_ingest.schemas.people import PersonRecord

REQUIRED_FIELDS = ("name", "age", "email")

RawRow = Mapping[str | None, Any]


def parse_csv(content: bytes) -> list[dict[str | None, Any]]:
    """Decode an uploaded file and return its data rows in source order."""
    text = content.decode("utf-8-sig", errors="replace")
    reader = csv.DictReader(io.StringIO(text))
    return list(reader)


def _get(row: RawRow, key: str) -> str:
    """Exact-key get, stripped. Absent keys and cells read as ''."""
    value = row.get(key)
    return value.strip() if isinstance(value, str) else ""


def validate_row(row: RawRow) -> PersonRecord | None:
    """Return the trimmed record, or None if name, age or email is blank."""
    name, age, email = (_get(row, field) for field in REQUIRED_FIELDS)
    if not name or not age or not email:
        return None
    return PersonRecord(name=name, age=age, email=email)


def collect_records(rows: Iterable[RawRow]) -> tuple[list[PersonRecord], int]:
    """Validate rows in order. Returns (valid records, rejected count)."""
    records: list[PersonRecord] = []
    rejected = 0
    for row in rows:
        record = validate_row(row)
        if record is None:
            rejected += 1
            continue
        records.append(record)
    return records, rejected
