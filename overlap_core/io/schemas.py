"""Column constants and field coercion for assignment CSV I/O."""

from __future__ import annotations

import re

# ---------------------------------------------------------------------------
# Input table
# ---------------------------------------------------------------------------

INPUT_COLS = [
    "empId",
    "projectId",
    "dateFrom",
    "dateTo",
]

HEADER_TOKEN = INPUT_COLS[0]

# dateTo values meaning "still on the project"
OPEN_END_TOKEN = "NULL"

FIELD_SPLIT = re.compile(r"\s*,\s*")

# ---------------------------------------------------------------------------
# Output files
# ---------------------------------------------------------------------------

ROWS_COLS = [
    "emp1",
    "emp2",
    "project_id",
    "days_worked",
]

SUMMARY_FIELDS = [
    "emp1",
    "emp2",
    "total_days",
    "projects",
    "message",
]

# ---------------------------------------------------------------------------
# Field helpers
# ---------------------------------------------------------------------------

_INT_RE = re.compile(r"[+-]?[0-9]+")


def split_fields(line: str) -> list[str]:
    """Split a trimmed row on commas, dropping whitespace around each comma."""
    return FIELD_SPLIT.split(line.strip())


def is_header(fields: list[str], header_token: str = HEADER_TOKEN) -> bool:
    return bool(fields) and fields[0].strip().lower() == header_token.lower()


def is_open_end(value: str | None) -> bool:
    """True for an empty or NULL end date."""
    if value is None:
        return True
    text = value.strip()
    return text == "" or text.upper() == OPEN_END_TOKEN


def to_int(value: str) -> int:
    """Strict integer coercion: optional sign, ASCII digits only.

    Raises ValueError otherwise.
    """
    text = value.strip()
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"not an integer: {value!r}")
    return int(text)
