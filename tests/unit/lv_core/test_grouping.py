"""Tests for bucketing rows and ordering groups."""

from __future__ import annotations

import pytest

from lv_core.columns import ColumnDescriptor, ColumnSet
from lv_core.grouping import MISSING_GROUP_KEY, bucket_rows, group_key_for, group_rows
from lv_core.sorting import SortDirection, SortState, sort_rows

pytestmark = pytest.mark.unit_core


def _sum_hours(_key, rows):
    return sum(row["hours"] for row in rows)


COLUMNS = ColumnSet(
    [
        ColumnDescriptor(key="day", sortable=True),
        ColumnDescriptor(key="hours", sortable=True, group_sort_value=_sum_hours),
    ]
)


def _keys(groups):
    return [group.key for group in groups]


def test_groups_follow_first_seen_order(dated_rows) -> None:
    groups = bucket_rows(dated_rows, "day")

    assert _keys(groups) == ["2024-01-01", "2024-01-02"]
    assert [row["id"] for row in groups[0].members] == [1, 3, 5]


def test_members_keep_sorted_order(dated_rows) -> None:
    ordered = sort_rows(dated_rows, SortState("hours", SortDirection.ASC), COLUMNS)

    groups = bucket_rows(ordered, "day")

    assert [row["id"] for row in groups[0].members] == [3, 1, 5]
    assert [row["id"] for row in groups[1].members] == [4, 2]


def test_every_row_lands_in_exactly_one_group(dated_rows) -> None:
    rows = dated_rows + [{"id": 6, "hours": 2.0}]

    groups = bucket_rows(rows, "day")

    assert sum(len(group) for group in groups) == len(rows)
    member_ids = [row["id"] for group in groups for row in group.members]
    assert sorted(member_ids) == [1, 2, 3, 4, 5, 6]


def test_group_sort_value_orders_groups_descending(dated_rows) -> None:
    groups = group_rows(
        dated_rows,
        "day",
        state=SortState("hours", SortDirection.DESC),
        columns=COLUMNS,
    )

    # 2024-01-02 sums to 7.0, 2024-01-01 to 2.5
    assert _keys(groups) == ["2024-01-02", "2024-01-01"]


def test_group_sort_value_orders_groups_ascending(dated_rows) -> None:
    rows = sorted(dated_rows, key=lambda row: row["day"], reverse=True)

    groups = group_rows(rows, "day", state=SortState("hours"), columns=COLUMNS)

    assert _keys(groups) == ["2024-01-01", "2024-01-02"]


def test_group_sort_value_beats_explicit_comparator(dated_rows) -> None:
    def alphabetical(a, b):
        return (a[0] > b[0]) - (a[0] < b[0])

    groups = group_rows(
        dated_rows,
        "day",
        state=SortState("hours", SortDirection.DESC),
        columns=COLUMNS,
        group_sort=alphabetical,
    )

    assert _keys(groups) == ["2024-01-02", "2024-01-01"]


def test_comparator_used_when_sort_column_has_no_aggregate(dated_rows) -> None:
    def newest_first(a, b):
        return (b[0] > a[0]) - (b[0] < a[0])

    groups = group_rows(
        dated_rows,
        "day",
        state=SortState("day"),
        columns=COLUMNS,
        group_sort=newest_first,
    )

    assert _keys(groups) == ["2024-01-02", "2024-01-01"]


def test_comparator_receives_key_and_members(dated_rows) -> None:
    seen = []

    def by_size(a, b):
        seen.append((a[0], len(a[1])))
        return len(a[1]) - len(b[1])

    groups = group_rows(dated_rows, "day", group_sort=by_size)

    assert _keys(groups) == ["2024-01-02", "2024-01-01"]
    assert seen


def test_no_sort_and_no_comparator_keeps_bucket_order(dated_rows) -> None:
    rows = sorted(dated_rows, key=lambda row: row["day"], reverse=True)

    groups = group_rows(rows, "day")

    assert _keys(groups) == ["2024-01-02", "2024-01-01"]


def test_missing_field_is_bucketed_not_dropped() -> None:
    rows = [{"id": 1, "day": None}, {"id": 2}, {"id": 3, "day": "x"}]

    groups = bucket_rows(rows, "day")

    assert _keys(groups) == [MISSING_GROUP_KEY, "x"]
    assert [row["id"] for row in groups[0].members] == [1, 2]


def test_failing_derivation_is_bucketed_not_dropped() -> None:
    def explode(row):
        if row["id"] == 2:
            raise KeyError("project")
        return "ok"

    groups = bucket_rows([{"id": 1}, {"id": 2}], explode)

    assert _keys(groups) == ["ok", MISSING_GROUP_KEY]


def test_group_key_for_stringifies_values() -> None:
    assert group_key_for({"year": 2024}, "year") == "2024"
    assert group_key_for({"year": 2024}, lambda row: row["year"] + 1) == "2025"
