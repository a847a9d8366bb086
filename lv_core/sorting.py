"""Single-column sorting for list views.

Sorting is stable: rows whose resolved values compare equal keep their input
order in both directions. Missing values (None, NaN) always sort after every
present value; the direction only flips the order among present values.
"""

from __future__ import annotations

import functools
import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional, Sequence, TypeVar

from lv_core.columns import ColumnDescriptor, ColumnSet, as_column_set

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class SortState:
    """The single active sort: a column key and a direction."""

    key: str
    direction: SortDirection = SortDirection.ASC

    def __post_init__(self) -> None:
        # Accept plain "asc"/"desc" strings from callers and config files.
        object.__setattr__(self, "direction", SortDirection(self.direction))

    @property
    def ascending(self) -> bool:
        return self.direction is SortDirection.ASC


def is_missing(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, float) and math.isnan(value)


def safe_value(func: Callable[..., Any], *args: Any) -> Any:
    """Evaluate a value extractor, treating a failure as a missing value."""
    try:
        return func(*args)
    except Exception:
        logger.warning("Sort value extraction failed; treating as missing", exc_info=True)
        return None


def _natural_compare(a: Any, b: Any) -> int:
    try:
        if a == b:
            return 0
        if a > b:
            return 1
        if a < b:
            return -1
    except TypeError:
        pass
    # Values of unrelated types: order by type name, then by text, so the
    # comparison stays total instead of raising mid-sort.
    fallback_a = (type(a).__name__, str(a))
    fallback_b = (type(b).__name__, str(b))
    if fallback_a == fallback_b:
        return 0
    return 1 if fallback_a > fallback_b else -1


def compare_values(a: Any, b: Any, direction: SortDirection = SortDirection.ASC) -> int:
    """Three-way compare with missing values last regardless of direction."""
    a_missing = is_missing(a)
    b_missing = is_missing(b)
    if a_missing and b_missing:
        return 0
    if a_missing:
        return 1
    if b_missing:
        return -1
    result = _natural_compare(a, b)
    return result if direction is SortDirection.ASC else -result


def sort_rows(
    rows: Sequence[T],
    state: Optional[SortState],
    columns: "ColumnSet[T] | Sequence[ColumnDescriptor[T]]",
) -> List[T]:
    """Return a new list of rows ordered by the active sort.

    An absent state or a key that names no column leaves the order unchanged.
    """
    result = list(rows)
    if state is None:
        return result
    column = as_column_set(columns).get(state.key)
    if column is None:
        logger.debug("Ignoring sort on unknown column '%s'", state.key)
        return result

    value_of = column.value_of
    direction = state.direction
    # Resolve each value once; list.sort keeps ties in input order.
    decorated = [(safe_value(value_of, row), row) for row in result]
    decorated.sort(
        key=functools.cmp_to_key(lambda x, y: compare_values(x[0], y[0], direction))
    )
    return [row for _, row in decorated]


def next_sort_state(current: Optional[SortState], key: str) -> SortState:
    """Header-click transition: ascending first, then flip between asc and desc."""
    if current is not None and current.key == key and current.ascending:
        return SortState(key, SortDirection.DESC)
    return SortState(key, SortDirection.ASC)


def sort_indicator(state: Optional[SortState], key: str) -> str:
    """Marker for a column header: "asc", "desc" or "none"."""
    if state is None or state.key != key:
        return "none"
    return state.direction.value
