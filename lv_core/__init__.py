"""Sort, group and paginate engine behind every list view."""

from lv_core.api import (
    ColumnDescriptor,
    ColumnSet,
    ExpansionState,
    PaginationProps,
    SortDirection,
    SortState,
    TableRender,
    TableView,
)

__all__ = [
    "ColumnDescriptor",
    "ColumnSet",
    "ExpansionState",
    "PaginationProps",
    "SortDirection",
    "SortState",
    "TableRender",
    "TableView",
]
