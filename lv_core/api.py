"""Public API surface for lv_core."""

from lv_core.columns import ColumnDescriptor, ColumnSet, ResolvedColumn, field_value
from lv_core.expansion import ExpansionState
from lv_core.grouping import MISSING_GROUP_KEY, Group, bucket_rows, group_rows, order_groups
from lv_core.orchestrator import (
    GroupRender,
    HeaderRender,
    ProcessedRows,
    TableRender,
    TableView,
    process_rows,
)
from lv_core.pagination import (
    Page,
    PageState,
    PaginationControls,
    PaginationProps,
    page_window,
    paginate,
    total_pages_for,
)
from lv_core.sorting import (
    SortDirection,
    SortState,
    compare_values,
    next_sort_state,
    sort_indicator,
    sort_rows,
)

__all__ = [
    "ColumnDescriptor",
    "ColumnSet",
    "ExpansionState",
    "Group",
    "GroupRender",
    "HeaderRender",
    "MISSING_GROUP_KEY",
    "Page",
    "PageState",
    "PaginationControls",
    "PaginationProps",
    "ProcessedRows",
    "ResolvedColumn",
    "SortDirection",
    "SortState",
    "TableRender",
    "TableView",
    "bucket_rows",
    "compare_values",
    "field_value",
    "group_rows",
    "next_sort_state",
    "order_groups",
    "page_window",
    "paginate",
    "process_rows",
    "sort_indicator",
    "sort_rows",
    "total_pages_for",
]
