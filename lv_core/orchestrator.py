"""Table view orchestration: sort, then group, then paginate.

`TableView` owns the sort, page and expansion state of one list view and
recomputes the pipeline lazily. `process_rows` is the pure pipeline it runs;
its result only depends on its arguments, so the view caches the last result
and reuses it until rows, sort, grouping or page inputs change.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, List, Optional, Sequence, Tuple, TypeVar

from lv_common.config import TableSettings
from lv_core.columns import ColumnDescriptor, ColumnSet, ResolvedColumn, as_column_set
from lv_core.expansion import ExpansionState
from lv_core.grouping import Group, GroupBy, GroupComparator, group_rows
from lv_core.pagination import (
    PageState,
    PaginationControls,
    PaginationProps,
    clamp_page,
    page_window,
    paginate,
)
from lv_core.sorting import SortState, next_sort_state, sort_indicator, sort_rows

logger = logging.getLogger(__name__)

T = TypeVar("T")

GroupHeaderRender = Callable[[str, List[T], bool, Callable[[], None]], Any]
SortCallback = Callable[[str, str], None]
RowClickCallback = Callable[[T], None]


@dataclass
class ProcessedRows(Generic[T]):
    """Output of one pipeline pass, before expansion is applied."""

    rows: List[T]
    groups: Optional[List[Group[T]]]
    current_page: int
    total_pages: int
    total_items: int


def process_rows(
    rows: Sequence[T],
    columns: ColumnSet[T],
    *,
    sort: Optional[SortState] = None,
    group_by: Optional[GroupBy] = None,
    group_sort: Optional[GroupComparator] = None,
    page: int = 1,
    page_size: Optional[int] = None,
    presorted: bool = False,
) -> ProcessedRows[T]:
    """Run sort -> group -> paginate over ``rows``.

    With ``presorted`` the rows are taken in the order given; the sort state
    still orders groups. A ``page_size`` of None returns everything on one
    page. When grouping, pages count groups rather than rows.
    """
    ordered = list(rows) if presorted else sort_rows(rows, sort, columns)
    if group_by is None:
        window = paginate(ordered, page, page_size)
        return ProcessedRows(
            rows=window.items,
            groups=None,
            current_page=window.current_page,
            total_pages=window.total_pages,
            total_items=window.total_items,
        )
    groups = group_rows(ordered, group_by, state=sort, columns=columns, group_sort=group_sort)
    window = paginate(groups, page, page_size)
    return ProcessedRows(
        rows=[row for group in window.items for row in group.members],
        groups=window.items,
        current_page=window.current_page,
        total_pages=window.total_pages,
        total_items=window.total_items,
    )


@dataclass
class HeaderRender:
    key: str
    title: str
    sortable: bool
    indicator: str
    align: str = "left"


@dataclass
class GroupRender(Generic[T]):
    key: str
    members: List[T]
    is_expanded: bool
    header: Any
    toggle: Callable[[], None]

    @property
    def visible_rows(self) -> List[T]:
        return self.members if self.is_expanded else []


@dataclass
class TableRender(Generic[T]):
    """Render-ready structure handed to presenters."""

    headers: List[HeaderRender]
    columns: List[ResolvedColumn[T]]
    rows: List[T]
    groups: Optional[List[GroupRender[T]]]
    controls: PaginationControls
    total_rows: int
    empty_message: str = ""
    sort: Optional[SortState] = None
    clickable: bool = False

    @property
    def is_grouped(self) -> bool:
        return self.groups is not None

    @property
    def is_empty(self) -> bool:
        return self.total_rows == 0

    def cells(self, row: T) -> List[str]:
        return [column.render_cell(row) for column in self.columns]


def default_group_header(key: str, members: Sequence[Any], is_expanded: bool) -> str:
    marker = "v" if is_expanded else ">"
    return f"{marker} {key} ({len(members)})"


class TableView(Generic[T]):
    """One list view: its inputs, its interaction state and its render pass.

    Every instance owns its own sort, page and expansion state; nothing is
    shared between views.
    """

    def __init__(
        self,
        rows: Sequence[T],
        columns: "ColumnSet[T] | Sequence[ColumnDescriptor[T]]",
        *,
        group_by: Optional[GroupBy] = None,
        group_header_render: Optional[GroupHeaderRender] = None,
        group_sort: Optional[GroupComparator] = None,
        pagination: Optional[PaginationProps] = None,
        default_sort: Optional[SortState] = None,
        on_sort: Optional[SortCallback] = None,
        page_size: Optional[int] = None,
        settings: Optional[TableSettings] = None,
        empty_message: Optional[str] = None,
        on_row_click: Optional[RowClickCallback] = None,
    ) -> None:
        self._settings = settings or TableSettings()
        self._empty_message = empty_message
        self._on_row_click = on_row_click
        self._rows: Sequence[T] = rows
        self._columns: ColumnSet[T] = as_column_set(columns)
        self._group_by = group_by
        self._group_header_render = group_header_render
        self._group_sort = group_sort
        self._pagination = pagination
        self._on_sort = on_sort
        self._sort: Optional[SortState] = default_sort
        resolved_size = page_size if page_size is not None else self._settings.default_page_size
        if resolved_size is not None and resolved_size <= 0:
            raise ValueError(f"page_size must be positive, got {resolved_size}")
        self._page = PageState(page_size=resolved_size)
        self._expansion = ExpansionState()
        self._cache_key: Optional[Tuple[Any, ...]] = None
        self._cached_rows: Optional[Sequence[T]] = None
        self._cached: Optional[ProcessedRows[T]] = None

    # -- state -----------------------------------------------------------

    @property
    def rows(self) -> Sequence[T]:
        return self._rows

    @property
    def columns(self) -> ColumnSet[T]:
        return self._columns

    @property
    def sort_state(self) -> Optional[SortState]:
        return self._sort

    @property
    def page_state(self) -> PageState:
        return self._page

    @property
    def expansion(self) -> ExpansionState:
        return self._expansion

    @property
    def empty_message(self) -> str:
        if self._empty_message is not None:
            return self._empty_message
        return self._settings.empty_message

    @property
    def controlled(self) -> bool:
        return self._pagination is not None

    @property
    def current_page(self) -> int:
        if self._pagination is not None:
            return self._pagination.current_page
        return self.process().current_page

    @property
    def total_pages(self) -> int:
        if self._pagination is not None:
            return self._pagination.total_pages
        return self.process().total_pages

    # -- events ----------------------------------------------------------

    def click_header(self, key: str) -> Optional[SortState]:
        """Apply a header click and return the resulting sort state.

        Unknown and non-sortable columns leave the state unchanged.
        """
        column = self._columns.get(key)
        if column is None or not column.sortable:
            logger.debug("Ignoring header click on '%s'", key)
            return self._sort
        self._sort = next_sort_state(self._sort, key)
        if self._on_sort is not None:
            self._on_sort(self._sort.key, self._sort.direction.value)
        return self._sort

    def change_page(self, page: int) -> int:
        """Move to ``page`` (clamped to the valid range) and return it."""
        if self._pagination is not None:
            target = clamp_page(page, self._pagination.total_pages)
            self._pagination.on_page_change(target)
            return target
        self._page.current_page = page
        target = self.process().current_page
        self._page.current_page = target
        return target

    def change_page_size(self, page_size: int) -> None:
        """Set a new page size; always returns to the first page."""
        if page_size <= 0:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self._page.resize(page_size)
        if self._pagination is not None and self._pagination.on_page_size_change is not None:
            self._pagination.on_page_size_change(page_size)

    def toggle_group(self, key: str) -> bool:
        """Flip one group's expansion; returns whether it is now expanded."""
        self._expansion = self._expansion.toggle(key)
        return self._expansion.is_expanded(key)

    def click_row(self, row: T) -> bool:
        """Forward a row activation to `on_row_click`; False when nobody listens."""
        if self._on_row_click is None:
            return False
        self._on_row_click(row)
        return True

    def set_rows(self, rows: Sequence[T]) -> None:
        """Replace the row collection; the next render starts from scratch."""
        self._rows = rows
        self._invalidate()

    def set_pagination(self, pagination: Optional[PaginationProps]) -> None:
        self._pagination = pagination
        self._invalidate()

    def set_group_by(
        self,
        group_by: Optional[GroupBy],
        group_sort: Optional[GroupComparator] = None,
    ) -> None:
        """Switch grouping on, off or to another key; expansion is kept."""
        self._group_by = group_by
        self._group_sort = group_sort
        self._invalidate()

    # -- pipeline --------------------------------------------------------

    def _invalidate(self) -> None:
        self._cache_key = None
        self._cached_rows = None
        self._cached = None

    def _pipeline_inputs(self) -> Tuple[Any, ...]:
        controlled = self._pagination is not None
        return (
            len(self._rows),
            self._sort,
            self._on_sort is not None,
            self._group_by,
            self._group_sort,
            controlled,
            None if controlled else self._page.current_page,
            None if controlled else self._page.page_size,
        )

    def process(self) -> ProcessedRows[T]:
        """Run (or reuse) the sort -> group -> paginate pipeline."""
        key = self._pipeline_inputs()
        # The rows object itself is held so identity checks never match a recycled id.
        if self._cached is not None and self._cached_rows is self._rows and key == self._cache_key:
            return self._cached
        controlled = self._pagination is not None
        self._cached = process_rows(
            self._rows,
            self._columns,
            sort=self._sort,
            group_by=self._group_by,
            group_sort=self._group_sort,
            page=self._page.current_page,
            page_size=None if controlled else self._page.page_size,
            presorted=self._on_sort is not None,
        )
        self._cache_key = key
        self._cached_rows = self._rows
        logger.debug(
            "Processed %d rows into page %d/%d",
            self._cached.total_items,
            self._cached.current_page,
            self._cached.total_pages,
        )
        return self._cached

    def _controls(self, processed: ProcessedRows[T]) -> PaginationControls:
        neighbors = self._settings.page_window_neighbors
        options = list(self._settings.page_size_options)
        if self._pagination is not None:
            props = self._pagination
            return PaginationControls(
                current_page=props.current_page,
                total_pages=props.total_pages,
                total_items=props.total_items,
                page_size=props.page_size or self._page.page_size,
                controlled=True,
                page_size_options=options,
                window=page_window(props.current_page, props.total_pages, neighbors),
            )
        return PaginationControls(
            current_page=processed.current_page,
            total_pages=processed.total_pages,
            total_items=len(self._rows),
            page_size=self._page.page_size,
            controlled=False,
            page_size_options=options,
            window=page_window(processed.current_page, processed.total_pages, neighbors),
        )

    def _group_render(self, group: Group[T]) -> GroupRender[T]:
        key = group.key
        expanded = self._expansion.is_expanded(key)

        def toggle() -> None:
            self.toggle_group(key)

        if self._group_header_render is not None:
            header = self._group_header_render(key, group.members, expanded, toggle)
        else:
            header = default_group_header(key, group.members, expanded)
        return GroupRender(
            key=key,
            members=group.members,
            is_expanded=expanded,
            header=header,
            toggle=toggle,
        )

    def render(self) -> TableRender[T]:
        processed = self.process()
        headers = [
            HeaderRender(
                key=column.key,
                title=column.title,
                sortable=column.sortable,
                indicator=sort_indicator(self._sort, column.key) if column.sortable else "none",
                align=column.align,
            )
            for column in self._columns
        ]
        groups = None
        if processed.groups is not None:
            groups = [self._group_render(group) for group in processed.groups]
        return TableRender(
            headers=headers,
            columns=list(self._columns),
            rows=processed.rows,
            groups=groups,
            controls=self._controls(processed),
            total_rows=len(self._rows),
            empty_message=self.empty_message,
            clickable=self._on_row_click is not None,
            sort=self._sort,
        )
