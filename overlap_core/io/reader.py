"""Read assignment rows (empId, projectId, dateFrom, dateTo) into Assignment records."""

from __future__ import annotations

import io
import logging
from datetime import date
from pathlib import Path
from typing import Iterable

from overlap_core.aggregator import Assignment
from overlap_core.date_utils import parse_date
from overlap_core.errors import InvalidInteger, MalformedRow, UnsupportedDateFormat

from .schemas import HEADER_TOKEN, INPUT_COLS, is_header, is_open_end, split_fields, to_int

logger = logging.getLogger(__name__)


def load_assignments(
    lines: Iterable[str],
    *,
    today: date | None = None,
    header_token: str = HEADER_TOKEN,
) -> list[Assignment]:
    """Parse raw text lines into assignments, failing on the first bad row.

    Blank lines are skipped. The first non-blank line is dropped when its
    first field matches ``header_token``. An empty or NULL end date means
    the assignment is still running and is replaced by ``today``.

    Raises MalformedRow, InvalidInteger or UnsupportedDateFormat.
    """
    if today is None:
        today = date.today()

    out: list[Assignment] = []
    seen_content = False
    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue

        fields = split_fields(line)
        if not seen_content:
            seen_content = True
            if is_header(fields, header_token):
                logger.debug("Skipping header row at line %d", line_number)
                continue

        if len(fields) != len(INPUT_COLS):
            raise MalformedRow(line_number, line)
        out.append(_parse_row(fields, line_number, today))

    logger.info("Loaded %d assignments", len(out))
    return out


def _parse_row(fields: list[str], line_number: int, today: date) -> Assignment:
    emp_raw, project_raw, from_raw, to_raw = fields
    employee_id = _int_field(emp_raw, line_number)
    project_id = _int_field(project_raw, line_number)
    date_from = _date_field(from_raw, line_number)
    date_to = today if is_open_end(to_raw) else _date_field(to_raw, line_number)
    return Assignment(
        employee_id=employee_id,
        project_id=project_id,
        date_from=date_from,
        date_to=date_to,
        line_number=line_number,
    )


def _int_field(value: str, line_number: int) -> int:
    try:
        return to_int(value)
    except ValueError as exc:
        raise InvalidInteger(line_number, value) from exc


def _date_field(value: str, line_number: int) -> date:
    try:
        return parse_date(value)
    except UnsupportedDateFormat as exc:
        raise UnsupportedDateFormat(exc.text, line_number=line_number) from exc


def read_lines(path: Path) -> list[str]:
    """Read a UTF-8 text file into lines (a leading BOM is dropped).

    Only LF, CR and CRLF end a line; form feeds and Unicode separators stay
    inside the row.

    Raises FileNotFoundError if the file is missing.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")
    with open(path, encoding="utf-8-sig") as f:
        return [line.rstrip("\n") for line in f]


def read_text_lines(text: str) -> list[str]:
    """Split an in-memory upload into lines, dropping a leading BOM."""
    with io.StringIO(text.lstrip("\ufeff"), newline=None) as f:
        return [line.rstrip("\n") for line in f]
