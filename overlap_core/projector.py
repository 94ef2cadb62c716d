"""Shape an aggregation result into an ordered report."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .aggregator import AggregationResult

OK_MESSAGE = "OK"


@dataclass(frozen=True)
class ReportRow:
    employee_a: int
    employee_b: int
    project_id: int
    days_worked: int


@dataclass(frozen=True)
class Report:
    employee_a: int
    employee_b: int
    total_days: int
    rows: tuple[ReportRow, ...]
    message: str = OK_MESSAGE


def project_result(result: AggregationResult) -> Report:
    """Build a report with one row per project, sorted by project id."""
    low, high = result.pair.low, result.pair.high
    rows = tuple(
        ReportRow(employee_a=low, employee_b=high, project_id=project_id, days_worked=days)
        for project_id, days in sorted(result.per_project_days.items())
    )
    return Report(employee_a=low, employee_b=high, total_days=result.total_days, rows=rows)


def row_to_dict(row: ReportRow) -> dict[str, Any]:
    return {
        "emp1": row.employee_a,
        "emp2": row.employee_b,
        "project_id": row.project_id,
        "days_worked": row.days_worked,
    }


def report_to_dict(report: Report) -> dict[str, Any]:
    """Wire shape of a report, as returned by the MCP tools and report.json."""
    return {
        "emp1": report.employee_a,
        "emp2": report.employee_b,
        "total_days": report.total_days,
        "rows": [row_to_dict(r) for r in report.rows],
        "message": report.message,
    }
