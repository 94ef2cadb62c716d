"""Find the pair of employees with the most shared project days."""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable

from .date_utils import overlap_days

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Assignment:
    employee_id: int
    project_id: int
    date_from: date
    date_to: date
    line_number: int | None = field(default=None, compare=False)


@dataclass(frozen=True)
class EmployeePair:
    """Unordered pair of two distinct employees, stored as (low, high)."""

    low: int
    high: int

    def __post_init__(self) -> None:
        if self.low == self.high:
            raise ValueError(f"Employee {self.low} cannot be paired with themselves")
        if self.low > self.high:
            low, high = self.high, self.low
            object.__setattr__(self, "low", low)
            object.__setattr__(self, "high", high)


@dataclass(frozen=True)
class AggregationResult:
    pair: EmployeePair
    per_project_days: dict[int, int]
    total_days: int


def group_by_project(assignments: Iterable[Assignment]) -> dict[int, list[Assignment]]:
    """Index assignments by project id, keeping input order inside each group."""
    by_project: dict[int, list[Assignment]] = defaultdict(list)
    for a in assignments:
        by_project[a.project_id].append(a)
    return dict(by_project)


def aggregate(assignments: Iterable[Assignment]) -> AggregationResult | None:
    """Accumulate pairwise overlap days per project and pick the best pair.

    Returns None when no pair of distinct employees shares a project. Among
    pairs with equal totals the one encountered first wins: projects in
    order of first appearance, pairs within a project in input order.
    """
    by_project = group_by_project(assignments)
    if not by_project:
        return None

    pair_project_days: dict[EmployeePair, dict[int, int]] = {}
    pair_total_days: dict[EmployeePair, int] = {}

    for project_id, group in by_project.items():
        for i, a in enumerate(group):
            for b in group[i + 1:]:
                if a.employee_id == b.employee_id:
                    continue
                days = overlap_days(a.date_from, a.date_to, b.date_from, b.date_to)
                pair = EmployeePair(a.employee_id, b.employee_id)
                per_project = pair_project_days.setdefault(pair, {})
                per_project[project_id] = per_project.get(project_id, 0) + days
                pair_total_days[pair] = pair_total_days.get(pair, 0) + days

    logger.debug(
        "Compared %d projects, %d distinct employee pairs",
        len(by_project),
        len(pair_total_days),
    )
    if not pair_total_days:
        return None

    # max() keeps the first maximal key in insertion order
    best = max(pair_total_days, key=pair_total_days.__getitem__)
    logger.info(
        "Best pair %d/%d with %d days together",
        best.low,
        best.high,
        pair_total_days[best],
    )
    return AggregationResult(
        pair=best,
        per_project_days=dict(pair_project_days[best]),
        total_days=pair_total_days[best],
    )
