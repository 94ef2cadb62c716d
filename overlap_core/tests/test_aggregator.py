"""Tests for pairwise overlap aggregation."""

from datetime import date

import pytest

from overlap_core.aggregator import (
    Assignment,
    EmployeePair,
    aggregate,
    group_by_project,
)


def _a(emp, project, start, end):
    return Assignment(emp, project, date.fromisoformat(start), date.fromisoformat(end))


class TestEmployeePair:
    def test_canonical_order(self):
        pair = EmployeePair(7, 3)
        assert (pair.low, pair.high) == (3, 7)

    def test_unordered_equality_and_hash(self):
        assert EmployeePair(3, 7) == EmployeePair(7, 3)
        assert hash(EmployeePair(3, 7)) == hash(EmployeePair(7, 3))
        assert len({EmployeePair(3, 7), EmployeePair(7, 3)}) == 1

    def test_distinct_pairs_differ(self):
        assert EmployeePair(1, 2) != EmployeePair(1, 3)

    def test_self_pair_rejected(self):
        with pytest.raises(ValueError):
            EmployeePair(4, 4)


class TestAssignment:
    def test_line_number_not_part_of_equality(self):
        a = Assignment(1, 2, date(2020, 1, 1), date(2020, 2, 1), line_number=3)
        b = Assignment(1, 2, date(2020, 1, 1), date(2020, 2, 1), line_number=9)
        assert a == b


class TestGroupByProject:
    def test_keeps_input_order(self):
        rows = [
            _a(1, 20, "2020-01-01", "2020-02-01"),
            _a(2, 10, "2020-01-01", "2020-02-01"),
            _a(3, 20, "2020-01-01", "2020-02-01"),
        ]
        groups = group_by_project(rows)
        assert list(groups) == [20, 10]
        assert [a.employee_id for a in groups[20]] == [1, 3]


class TestAggregate:
    def test_empty_input(self):
        assert aggregate([]) is None

    def test_single_assignment(self):
        assert aggregate([_a(1, 1, "2020-01-01", "2020-01-10")]) is None

    def test_same_employee_never_pairs(self):
        rows = [
            _a(1, 1, "2020-01-01", "2020-01-10"),
            _a(1, 1, "2020-01-05", "2020-01-15"),
            _a(1, 2, "2020-01-01", "2020-01-10"),
        ]
        assert aggregate(rows) is None

    def test_different_projects_never_pair(self):
        rows = [
            _a(1, 1, "2020-01-01", "2020-01-10"),
            _a(2, 2, "2020-01-01", "2020-01-10"),
        ]
        assert aggregate(rows) is None

    def test_two_employees_one_project(self):
        result = aggregate([
            _a(1, 1, "2020-01-01", "2020-01-10"),
            _a(2, 1, "2020-01-05", "2020-01-15"),
        ])
        assert result.pair == EmployeePair(1, 2)
        assert result.total_days == 5
        assert result.per_project_days == {1: 5}

    def test_three_employees_best_pair(self):
        # 1/2 share 5 days, 1/3 share 8 days, 2/3 share 2 days
        result = aggregate([
            _a(1, 1, "2020-01-01", "2020-01-12"),
            _a(2, 1, "2019-12-20", "2020-01-06"),
            _a(3, 1, "2020-01-04", "2020-01-20"),
        ])
        assert result.pair == EmployeePair(1, 3)
        assert result.total_days == 8

    def test_totals_accumulate_across_projects(self):
        result = aggregate([
            _a(1, 1, "2020-01-01", "2020-01-10"),
            _a(2, 1, "2020-01-05", "2020-01-15"),
            _a(2, 2, "2021-03-01", "2021-03-31"),
            _a(1, 2, "2021-03-21", "2021-06-01"),
            _a(3, 1, "2020-01-01", "2020-01-12"),
        ])
        # 1/3: 9 days on project 1; 1/2: 5 + 10
        assert result.pair == EmployeePair(1, 2)
        assert result.total_days == 15
        assert result.per_project_days == {1: 5, 2: 10}

    def test_repeat_stints_on_same_project_add_up(self):
        result = aggregate([
            _a(1, 1, "2020-01-01", "2020-01-11"),
            _a(1, 1, "2020-03-01", "2020-03-04"),
            _a(2, 1, "2020-01-01", "2020-12-31"),
        ])
        assert result.total_days == 13
        assert result.per_project_days == {1: 13}

    def test_disjoint_ranges_do_not_drag_total_down(self):
        result = aggregate([
            _a(1, 1, "2020-01-01", "2020-01-31"),
            _a(2, 1, "2020-01-21", "2020-02-28"),
            _a(2, 1, "2022-01-01", "2022-12-31"),
        ])
        assert result.total_days == 10

    def test_all_zero_still_returns_a_pair(self):
        result = aggregate([
            _a(1, 1, "2020-01-01", "2020-01-10"),
            _a(2, 1, "2020-02-01", "2020-02-10"),
        ])
        assert result.pair == EmployeePair(1, 2)
        assert result.total_days == 0
        assert result.per_project_days == {1: 0}

    def test_inverted_range_contributes_zero(self):
        result = aggregate([
            _a(1, 1, "2020-01-31", "2020-01-01"),
            _a(2, 1, "2020-01-01", "2020-01-31"),
        ])
        assert result.total_days == 0

    def test_tie_goes_to_first_encountered_pair(self):
        result = aggregate([
            _a(3, 2, "2020-01-01", "2020-01-06"),
            _a(1, 1, "2020-01-01", "2020-01-06"),
            _a(4, 2, "2020-01-01", "2020-01-06"),
            _a(2, 1, "2020-01-01", "2020-01-06"),
        ])
        # project 2 is seen first
        assert result.pair == EmployeePair(3, 4)
        assert result.total_days == 5

    def test_order_of_pair_members_is_irrelevant(self):
        forward = aggregate([
            _a(7, 1, "2020-01-01", "2020-01-10"),
            _a(3, 1, "2020-01-05", "2020-01-15"),
        ])
        backward = aggregate([
            _a(3, 1, "2020-01-05", "2020-01-15"),
            _a(7, 1, "2020-01-01", "2020-01-10"),
        ])
        assert forward == backward
