"""Render a Report to an XLSX workbook."""

from __future__ import annotations

from pathlib import Path

from overlap_core.projector import Report, row_to_dict

from .schemas import ROWS_COLS, SUMMARY_FIELDS


def _get_openpyxl():
    try:
        from openpyxl import Workbook
        from openpyxl.styles import Font, PatternFill
        return Workbook, Font, PatternFill
    except ImportError as exc:
        raise ImportError("openpyxl is required for XLSX export: pip install openpyxl") from exc


def _style_headers(worksheets):
    """Apply bold + blue fill to header row of each worksheet."""
    _, Font, PatternFill = _get_openpyxl()
    header_font = Font(bold=True)
    header_fill = PatternFill(start_color="D9E1F2", end_color="D9E1F2", fill_type="solid")
    for ws in worksheets:
        for cell in ws[1]:
            cell.font = header_font
            cell.fill = header_fill


def _summary_values(report: Report) -> dict[str, object]:
    return {
        "emp1": report.employee_a,
        "emp2": report.employee_b,
        "total_days": report.total_days,
        "projects": len(report.rows),
        "message": report.message,
    }


def render_xlsx(report: Report, path: Path) -> Path:
    """Render a report to a workbook with Rows and Summary sheets.

    Returns the path to the written file.
    """
    Workbook, _, _ = _get_openpyxl()

    wb = Workbook()

    ws_rows = wb.active
    ws_rows.title = "Rows"
    ws_rows.append(ROWS_COLS)
    for row in report.rows:
        values = row_to_dict(row)
        ws_rows.append([values[c] for c in ROWS_COLS])

    ws_summary = wb.create_sheet("Summary")
    ws_summary.append(["Field", "Value"])
    summary = _summary_values(report)
    for field_name in SUMMARY_FIELDS:
        ws_summary.append([field_name, summary[field_name]])

    _style_headers([ws_rows, ws_summary])
    ws_rows.freeze_panes = "A2"

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    wb.save(path)
    return path
