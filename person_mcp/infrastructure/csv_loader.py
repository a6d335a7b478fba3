"""CSV Loader: reads the initial Person dataset handed to PersonStore.initialize().

Invariants:
    - Header-based: columns id, first_name, last_name, email, sex, ip_address, job_title, age
    - "gender" accepted as an alias for "sex" (common export header)
    - Rows returned in file order; blank lines skipped; text fields stripped
    - UTF-8 with or without a leading BOM
    - Any unreadable or undecodable file, missing column or non-integer id/age raises DatasetLoadError

Design Decisions:
    - stdlib csv.DictReader: the dataset is small and flat, no dataframe needed
    - Loader does not dedupe ids: PersonStore.initialize owns that invariant
"""

import csv
import logging
from pathlib import Path

from person_mcp.core.errors import DatasetLoadError
from person_mcp.core.person import PERSON_FIELDS, Person

logger = logging.getLogger(__name__)

_COLUMN_ALIASES = {"gender": "sex"}


def load_persons(path: str | Path) -> list[Person]:
    """Parse the CSV at path into Person values."""
    source = str(path)
    try:
        with open(path, newline="", encoding="utf-8-sig") as handle:
            persons = _parse_rows(csv.DictReader(handle), source)
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise DatasetLoadError(str(e), source) from e
    logger.info(f"Loaded {len(persons)} persons from {source}")
    return persons


def _parse_rows(reader: csv.DictReader, source: str) -> list[Person]:
    columns = _normalize_header(reader.fieldnames, source)
    persons = []
    for row in reader:
        line = reader.line_num
        values = {
            columns[key]: (value or "").strip()
            for key, value in row.items()
            if key in columns
        }
        if not any(values.values()):
            continue
        persons.append(_row_to_person(values, line, source))
    return persons


def _normalize_header(fieldnames: list[str] | None, source: str) -> dict[str, str]:
    """Map raw header names to Person field names; fail on missing columns."""
    if not fieldnames:
        raise DatasetLoadError("file has no header row", source)
    columns = {}
    for raw in fieldnames:
        name = raw.strip().lower()
        name = _COLUMN_ALIASES.get(name, name)
        if name in PERSON_FIELDS:
            columns[raw] = name
    missing = [f for f in PERSON_FIELDS if f not in columns.values()]
    if missing:
        raise DatasetLoadError(f"missing columns: {', '.join(missing)}", source)
    return columns


def _row_to_person(values: dict[str, str], line: int, source: str) -> Person:
    try:
        return Person(
            id=int(values["id"]),
            first_name=values["first_name"],
            last_name=values["last_name"],
            email=values["email"],
            sex=values["sex"],
            ip_address=values["ip_address"],
            job_title=values["job_title"],
            age=int(values["age"]),
        )
    except ValueError as e:
        raise DatasetLoadError(f"line {line}: {e}", source) from e
