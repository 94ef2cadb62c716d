"""Command-line front end: analyze a CSV file and print or export the report."""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from overlap_core import AnalysisError, Report, analyze, report_to_dict
from overlap_core.io import read_lines, render_xlsx, write_output

from .config import configure_logging, load_env, runtime_config

EXIT_ANALYSIS_ERROR = 2


def format_report(report: Report) -> str:
    lines = [
        f"Employees {report.employee_a} and {report.employee_b} "
        f"worked together for {report.total_days} days",
        "",
        f"{'emp1':>8} {'emp2':>8} {'project':>8} {'days':>8}",
    ]
    for row in report.rows:
        lines.append(
            f"{row.employee_a:>8} {row.employee_b:>8} {row.project_id:>8} {row.days_worked:>8}"
        )
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pair-finder",
        description="Find the pair of employees who worked together longest on shared projects",
    )
    parser.add_argument("file", type=Path, help="CSV file with empId, projectId, dateFrom, dateTo rows")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument("--export-dir", type=Path, default=None, help="Also write report.json and rows.csv here")
    parser.add_argument("--xlsx", type=Path, default=None, help="Also write an XLSX workbook to this path")
    parser.add_argument("--env-file", default=None, help="Path to .env file")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    load_env(args.env_file)
    cfg = runtime_config()
    try:
        configure_logging(cfg)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ANALYSIS_ERROR

    try:
        report = analyze(read_lines(args.file), header_token=cfg.header_token)
    except AnalysisError as exc:
        payload = json.dumps(exc.to_dict()) if args.json else f"error: {exc}"
        print(payload, file=sys.stderr)
        return EXIT_ANALYSIS_ERROR
    except FileNotFoundError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ANALYSIS_ERROR

    if args.json:
        print(json.dumps(report_to_dict(report), indent=2))
    else:
        print(format_report(report))

    if args.export_dir is not None:
        write_output(report, args.export_dir)
    if args.xlsx is not None:
        render_xlsx(report, args.xlsx)
    return 0


if __name__ == "__main__":
    sys.exit(main())
