"""Core overlap analysis: who worked together longest, and on which projects."""

from .aggregator import AggregationResult, Assignment, EmployeePair, aggregate
from .analysis import analyze
from .date_utils import overlap_days, parse_date
from .errors import (
    AnalysisError,
    InvalidInteger,
    MalformedRow,
    NoData,
    UnsupportedDateFormat,
)
from .projector import Report, ReportRow, project_result, report_to_dict

__all__ = [
    "AggregationResult",
    "AnalysisError",
    "Assignment",
    "EmployeePair",
    "InvalidInteger",
    "MalformedRow",
    "NoData",
    "Report",
    "ReportRow",
    "UnsupportedDateFormat",
    "aggregate",
    "analyze",
    "overlap_days",
    "parse_date",
    "project_result",
    "report_to_dict",
]
