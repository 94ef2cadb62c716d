"""Write a Report to report.json plus a flat rows.csv."""

from __future__ import annotations

import csv
import json
from pathlib import Path

from overlap_core.projector import Report, report_to_dict, row_to_dict

from .schemas import ROWS_COLS


def write_output(report: Report, directory: Path) -> dict[str, Path]:
    """Write report.json (wire shape) and rows.csv (one row per project).

    Returns {"report.json": Path(...), "rows.csv": Path(...)}.
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)

    report_path = directory / "report.json"
    report_path.write_text(
        json.dumps(report_to_dict(report), indent=2, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )

    rows_path = directory / "rows.csv"
    with open(rows_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=ROWS_COLS)
        writer.writeheader()
        for row in report.rows:
            writer.writerow(row_to_dict(row))

    return {"report.json": report_path, "rows.csv": rows_path}
