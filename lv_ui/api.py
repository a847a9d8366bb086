"""Stable UI API surface."""

from __future__ import annotations

from lv_ui.cli import app, ctx_store, main
from lv_ui.presenters.table_view import build_table_model, format_pager
from lv_ui.tui.headless import HeadlessTablePresenter
from lv_ui.tui.models import TableModel
from lv_ui.tui.table import RichTablePresenter
from lv_ui.tui.table_layout import build_rich_table

__all__ = [
    "app",
    "main",
    "ctx_store",
    "build_rich_table",
    "build_table_model",
    "format_pager",
    "HeadlessTablePresenter",
    "RichTablePresenter",
    "TableModel",
]
