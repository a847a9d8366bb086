"""Grouping of sorted rows into named buckets.

Rows are bucketed in a single pass, so groups appear in first-seen order and
members keep the order the sort engine produced. The bucket list is then
ordered by, in priority order:

1. the active sort column's group aggregate value, when it defines one;
2. an explicit ``group_sort`` comparator;
3. first-seen order.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, List, Optional, Sequence, Tuple, TypeVar, Union

from lv_core.columns import ColumnDescriptor, ColumnSet, as_column_set, field_value
from lv_core.sorting import SortState, compare_values, safe_value

logger = logging.getLogger(__name__)

T = TypeVar("T")

MISSING_GROUP_KEY = "None"

GroupBy = Union[str, Callable[[T], Any]]
GroupEntry = Tuple[str, List[T]]
GroupComparator = Callable[[GroupEntry, GroupEntry], int]


@dataclass
class Group(Generic[T]):
    """A named bucket of rows sharing a derived key."""

    key: str
    members: List[T] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.members)

    def as_entry(self) -> GroupEntry:
        return (self.key, self.members)


def group_key_for(row: T, group_by: GroupBy) -> str:
    """Derive the group key of a row; failures land in the missing-key group."""
    if callable(group_by):
        try:
            value = group_by(row)
        except Exception:
            logger.warning(
                "Group key derivation failed; using '%s'", MISSING_GROUP_KEY, exc_info=True
            )
            return MISSING_GROUP_KEY
    else:
        value = field_value(row, group_by)
    if value is None:
        return MISSING_GROUP_KEY
    return str(value)


def bucket_rows(rows: Sequence[T], group_by: GroupBy) -> List[Group[T]]:
    buckets: Dict[str, Group[T]] = {}
    for row in rows:
        key = group_key_for(row, group_by)
        bucket = buckets.get(key)
        if bucket is None:
            bucket = Group(key)
            buckets[key] = bucket
        bucket.members.append(row)
    return list(buckets.values())


def order_groups(
    groups: Sequence[Group[T]],
    state: Optional[SortState],
    columns: "ColumnSet[T] | Sequence[ColumnDescriptor[T]]",
    group_sort: Optional[GroupComparator] = None,
) -> List[Group[T]]:
    """Order groups using the three-tier rule described in the module docs."""
    ordered = list(groups)
    if state is not None:
        column = as_column_set(columns).get(state.key)
        if column is not None and column.group_value_of is not None:
            aggregate = column.group_value_of
            values = {
                id(group): safe_value(aggregate, group.key, group.members) for group in ordered
            }
            direction = state.direction
            ordered.sort(
                key=functools.cmp_to_key(
                    lambda a, b: compare_values(values[id(a)], values[id(b)], direction)
                )
            )
            return ordered
    if group_sort is not None:
        ordered.sort(
            key=functools.cmp_to_key(lambda a, b: group_sort(a.as_entry(), b.as_entry()))
        )
    return ordered


def group_rows(
    rows: Sequence[T],
    group_by: GroupBy,
    *,
    state: Optional[SortState] = None,
    columns: "ColumnSet[T] | Sequence[ColumnDescriptor[T]]" = (),
    group_sort: Optional[GroupComparator] = None,
) -> List[Group[T]]:
    """Bucket already-sorted rows and order the resulting groups."""
    return order_groups(bucket_rows(rows, group_by), state, columns, group_sort)
