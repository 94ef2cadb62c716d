"""pair-finder MCP server.

Exposes tools that analyze an employee/project assignment table and return
the pair of employees who worked together longest, with a per-project
breakdown. Reports can also be exported as JSON/CSV or XLSX.
"""
from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
from typing import Any
from uuid import uuid4

from mcp.server.fastmcp import FastMCP

from overlap_core import analyze, report_to_dict
from overlap_core.io import read_lines, read_text_lines, render_xlsx, write_output

from .config import RuntimeConfig, configure_logging, ensure_export_root, load_env, runtime_config

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ("json", "xlsx")

mcp = FastMCP(
    "pair-finder",
    host=os.getenv("HOST", "127.0.0.1"),
    port=int(os.getenv("PORT", "8000")),
    instructions=(
        "Finds the pair of employees who spent the most days working together "
        "on shared projects. Input is a CSV table of empId, projectId, "
        "dateFrom, dateTo rows; an empty or NULL dateTo means the assignment "
        "is still running."
    ),
)

_ENV_FILE: str | None = None


def _config() -> RuntimeConfig:
    load_env(_ENV_FILE or os.getenv("PAIR_FINDER_ENV_FILE"))
    return runtime_config()


@mcp.tool()
def analyze_csv(csv_text: str) -> dict[str, Any]:
    """Analyze an assignment table passed inline as CSV text.

    Returns emp1, emp2, total_days, rows (one per shared project, sorted by
    project_id) and message.
    """
    cfg = _config()
    report = analyze(read_text_lines(csv_text), header_token=cfg.header_token)
    return report_to_dict(report)


@mcp.tool()
def analyze_file(path: str) -> dict[str, Any]:
    """Analyze an assignment table stored in a local CSV file."""
    cfg = _config()
    report = analyze(read_lines(Path(path)), header_token=cfg.header_token)
    return report_to_dict(report)


@mcp.tool()
def export_report(path: str, fmt: str = "json") -> dict[str, Any]:
    """Analyze a CSV file and write the report into the export directory.

    fmt "json" writes report.json + rows.csv, fmt "xlsx" writes report.xlsx.
    Returns the report id and the written file paths.
    """
    if fmt not in EXPORT_FORMATS:
        raise ValueError(f"Unknown export format: {fmt!r}. Choose from {EXPORT_FORMATS}")

    cfg = _config()
    report = analyze(read_lines(Path(path)), header_token=cfg.header_token)

    report_id = f"report-{uuid4().hex[:12]}"
    target = ensure_export_root(cfg) / report_id
    if fmt == "xlsx":
        files = {"report.xlsx": render_xlsx(report, target / "report.xlsx")}
    else:
        files = write_output(report, target)
    logger.info("Exported %s to %s", report_id, target)

    return {
        "report_id": report_id,
        "files": {name: str(p) for name, p in files.items()},
        "summary": report_to_dict(report),
    }


def main() -> None:
    global _ENV_FILE

    parser = argparse.ArgumentParser(description="Run pair-finder MCP server")
    parser.add_argument("--env-file", default=None, help="Path to .env file")
    parser.add_argument(
        "--transport",
        default=None,
        choices=["stdio", "sse", "streamable-http"],
        help="MCP transport (default: streamable-http when PORT is set, else stdio)",
    )
    args = parser.parse_args()
    _ENV_FILE = args.env_file

    configure_logging(_config())

    transport = args.transport
    if transport is None:
        transport = "streamable-http" if os.getenv("PORT") else "stdio"
    mcp.run(transport=transport)


if __name__ == "__main__":
    main()
