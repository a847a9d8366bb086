"""Presenters mapping engine output to UI models."""

from lv_ui.presenters.table_view import build_table_model, format_pager, header_label
from lv_ui.presenters.views import build_views_table

__all__ = ["build_table_model", "build_views_table", "format_pager", "header_label"]
