"""Presenter turning a rendered table view into a flat TableModel."""

from __future__ import annotations

from typing import Any, List

from lv_core.orchestrator import TableRender
from lv_core.pagination import ELLIPSIS, PaginationControls
from lv_ui.tui.models import TableModel
from lv_ui.tui.theme import SORT_MARKERS

MEMBER_INDENT = "  "


def header_label(title: str, sortable: bool, indicator: str) -> str:
    if not sortable:
        return title
    return f"{title} {SORT_MARKERS.get(indicator, SORT_MARKERS['none'])}"


def format_pager(controls: PaginationControls) -> str:
    """One-line pager: ``‹ 1 … [4] 5 … 9 ›  Page 4 of 9 (85 entries)``."""
    if not controls.visible:
        return ""
    buttons: List[str] = ["‹" if controls.has_previous else " "]
    for button in controls.window:
        if button == ELLIPSIS:
            buttons.append("…")
        elif button == controls.current_page:
            buttons.append(f"[{button}]")
        else:
            buttons.append(str(button))
    buttons.append("›" if controls.has_next else " ")
    pager = " ".join(buttons).strip()
    return f"{pager}  {controls.summary}"


def _header_text(header: Any) -> str:
    return "" if header is None else str(header)


def build_table_model(render: TableRender, title: str) -> TableModel:
    """Flatten headers, groups and rows of one render pass into text."""
    columns = [header_label(h.title, h.sortable, h.indicator) for h in render.headers]
    width = len(columns)
    rows: List[List[str]] = []
    group_header_rows: List[int] = []

    if render.is_empty:
        return TableModel(title=title, columns=columns, rows=[], caption=render.empty_message)

    if render.groups is not None:
        for group in render.groups:
            group_header_rows.append(len(rows))
            rows.append([_header_text(group.header)] + [""] * (width - 1))
            for row in group.visible_rows:
                cells = render.cells(row)
                if cells:
                    cells[0] = MEMBER_INDENT + cells[0]
                rows.append(cells)
    else:
        rows.extend(render.cells(row) for row in render.rows)

    return TableModel(
        title=title,
        columns=columns,
        rows=rows,
        caption=format_pager(render.controls),
        group_header_rows=group_header_rows,
    )
