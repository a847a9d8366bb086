from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer

from lv_common.api import LVError, load_rows
from lv_core.orchestrator import TableView
from lv_core.sorting import SortDirection, SortState
from lv_core.views import get_view
from lv_ui.presenters.table_view import build_table_model
from lv_ui.wiring.dependencies import UIContext

logger = logging.getLogger(__name__)


def register_show_command(app: typer.Typer, ctx: UIContext) -> None:
    """Attach the `show` command to the root app."""

    @app.command("show")
    def show(
        rows_file: Path = typer.Argument(..., help="JSON, YAML or CSV file with the rows."),
        view: str = typer.Option("generic", "--view", "-v", help="Prebuilt view to render."),
        sort: Optional[str] = typer.Option(None, "--sort", "-s", help="Column key to sort by."),
        desc: bool = typer.Option(False, "--desc", help="Sort descending."),
        group_by: Optional[str] = typer.Option(
            None, "--group-by", "-g", help="Field to group rows by (overrides the view)."
        ),
        expand: Optional[List[str]] = typer.Option(
            None, "--expand", "-e", help="Group key to expand (repeatable)."
        ),
        expand_all: bool = typer.Option(False, "--expand-all", help="Expand every group on the page."),
        page: int = typer.Option(1, "--page", "-p", min=1, help="Page to show."),
        page_size: Optional[int] = typer.Option(
            None, "--page-size", "-n", min=1, help="Rows (or groups) per page."
        ),
        title: Optional[str] = typer.Option(None, "--title", help="Table title."),
    ) -> None:
        """Sort, group and paginate a row file and print the result."""
        try:
            definition = get_view(view)
        except KeyError as exc:
            ctx.messages.emit("error", str(exc.args[0]))
            raise typer.Exit(2)

        try:
            settings = ctx.settings
            rows = load_rows(rows_file)
            columns = definition.build_columns(rows)
        except LVError as exc:
            logger.debug("show failed", exc_info=True)
            ctx.messages.emit("error", str(exc))
            raise typer.Exit(1)

        if sort is not None and sort not in columns:
            ctx.messages.emit("warning", f"Unknown sort column '{sort}'; rows left unsorted.")

        effective_group_by = group_by if group_by is not None else definition.group_by
        custom_grouping = group_by is not None
        table = TableView(
            rows,
            columns,
            group_by=effective_group_by,
            group_sort=None if custom_grouping else definition.group_sort,
            group_header_render=None if custom_grouping else definition.group_header_render,
            default_sort=SortState(sort, SortDirection.DESC if desc else SortDirection.ASC)
            if sort
            else None,
            page_size=page_size or definition.page_size,
            settings=settings,
            empty_message=definition.empty_message,
        )
        for key in expand or []:
            table.toggle_group(key)
        table.change_page(page)
        if expand_all:
            for group in table.process().groups or []:
                if not table.expansion.is_expanded(group.key):
                    table.toggle_group(group.key)

        ctx.presenter.show(build_table_model(table.render(), title or definition.title))
