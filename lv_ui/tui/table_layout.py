from __future__ import annotations

import shutil

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from lv_ui.tui import theme
from lv_ui.tui.models import TableModel


def _console_width(console: Console) -> int | None:
    try:
        width = int(getattr(console.size, "width"))
        if width > 0:
            return width
    except (AttributeError, TypeError, ValueError):
        pass
    width = int(shutil.get_terminal_size(fallback=(100, 24)).columns)
    return width if width > 0 else None


def _cell_width(value: str) -> int:
    # Use the longest line width for multi-line cells.
    return max((len(line) for line in str(value).splitlines()), default=0)


def _cells(row: list[str]) -> list[Text]:
    # Plain text: row values must never be parsed as rich markup.
    return [Text(str(cell)) for cell in row]


def _desired_widths(model: TableModel, max_table_width: int, min_col_width: int) -> list[int]:
    column_count = max(1, len(model.columns))
    # Rough overhead for borders + separators + padding.
    overhead = 4 + (column_count - 1) * 3
    group_rows = set(model.group_header_rows)

    desired: list[int] = []
    for idx, col in enumerate(model.columns):
        max_len = _cell_width(col)
        for row_idx, row in enumerate(model.rows):
            # Group headers live in the first cell but should not widen it.
            if row_idx in group_rows:
                continue
            if idx < len(row):
                max_len = max(max_len, _cell_width(row[idx]))
        desired.append(max(min_col_width, min(max_len, max_table_width)))

    # Shrink widest columns until the approximate total fits.
    while desired and sum(desired) + overhead > max_table_width:
        widest = max(range(len(desired)), key=lambda i: desired[i])
        if desired[widest] <= min_col_width:
            break
        desired[widest] -= 1
    return desired


def build_rich_table(
    model: TableModel,
    *,
    console: Console,
    show_lines: bool = False,
    border_style: str = theme.RICH_BORDER_STYLE,
    header_style: str = theme.RICH_ACCENT_BOLD,
    title_style: str = theme.RICH_ACCENT_BOLD,
    box_style: box.Box = box.ROUNDED,
) -> Table:
    """
    Build a Rich Table from a TableModel that fits the current terminal width.

    Columns are rendered single-line and truncated with ellipsis when needed.
    Group header rows are styled and may overflow into the empty cells that
    follow them.
    """
    term_width = _console_width(console)
    max_table_width = max(60, (term_width - 2) if term_width else 100)
    min_col_width = 4

    title_text = Text(str(model.title))
    title_text.no_wrap = True
    title_text.overflow = "ellipsis"
    title_max = max(10, max_table_width - 6)
    if len(title_text) > title_max:
        title_text.truncate(title_max, overflow="ellipsis")

    rich_table = Table(
        title=title_text,
        caption=Text(model.caption) if model.caption else None,
        caption_style=theme.RICH_CAPTION_STYLE,
        show_lines=show_lines,
        expand=True,
        width=max_table_width,
        box=box_style,
        border_style=border_style,
        header_style=header_style,
        title_style=title_style,
    )

    desired = _desired_widths(model, max_table_width, min_col_width)
    for idx, col in enumerate(model.columns):
        rich_table.add_column(
            Text(col),
            overflow="ellipsis",
            no_wrap=True,
            min_width=min_col_width,
            max_width=desired[idx] if idx < len(desired) else None,
        )

    group_rows = set(model.group_header_rows)
    for row_idx, row in enumerate(model.rows):
        if row_idx in group_rows:
            rich_table.add_row(*_cells(row), style=theme.RICH_GROUP_STYLE)
        else:
            rich_table.add_row(*_cells(row))
    return rich_table
