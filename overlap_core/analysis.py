"""Entry point used by hosts: raw lines in, report out."""

from __future__ import annotations

from datetime import date
from typing import Iterable

from .aggregator import aggregate
from .errors import NoData
from .io.reader import load_assignments
from .io.schemas import HEADER_TOKEN
from .projector import Report, project_result


def analyze(
    lines: Iterable[str],
    *,
    today: date | None = None,
    header_token: str = HEADER_TOKEN,
) -> Report:
    """Load, aggregate and project in one call.

    Raises NoData when nothing was loaded or no two employees share a
    project; loader errors propagate unchanged.
    """
    assignments = load_assignments(lines, today=today, header_token=header_token)
    if not assignments:
        raise NoData()

    result = aggregate(assignments)
    if result is None:
        raise NoData("No two employees share a project")
    return project_result(result)
