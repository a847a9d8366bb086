"""Shared helpers for listview-pipeline."""

from lv_common.api import (
    LVError,
    TableSettings,
    configure_logging,
    load_rows,
    load_settings,
)

__all__ = ["LVError", "TableSettings", "configure_logging", "load_rows", "load_settings"]
