"""Presenter for the list of prebuilt views."""

from __future__ import annotations

from typing import Sequence

from lv_core.views import ViewDefinition
from lv_ui.tui.models import TableModel


def build_views_table(views: Sequence[ViewDefinition]) -> TableModel:
    rows = [
        [
            view.name,
            view.title,
            "yes" if view.group_by is not None else "no",
            str(view.page_size) if view.page_size else "-",
            view.description,
        ]
        for view in views
    ]
    return TableModel(
        title="Available Views",
        columns=["Name", "Title", "Grouped", "Page Size", "Description"],
        rows=rows,
    )
