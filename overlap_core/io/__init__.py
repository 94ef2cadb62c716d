"""Input/output layer for the overlap analysis.

Public API:
    load_assignments(lines)     -- raw text lines -> list[Assignment]
    read_lines(path)            -- UTF-8 file -> list of lines
    write_output(report, dir)   -- write report.json and rows.csv
    render_xlsx(report, path)   -- write a Rows/Summary workbook
"""

from .reader import load_assignments, read_lines, read_text_lines
from .writer import write_output

__all__ = [
    "load_assignments",
    "read_lines",
    "read_text_lines",
    "write_output",
]


# Lazy import for the optional openpyxl dependency.
def render_xlsx(*args, **kwargs):
    from .xlsx import render_xlsx as _fn
    return _fn(*args, **kwargs)
