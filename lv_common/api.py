"""Public API surface for lv_common."""

from lv_common.config import TableSettings, load_settings
from lv_common.errors import (
    ColumnConfigurationError,
    LVError,
    RowSourceError,
    SettingsError,
    error_to_payload,
)
from lv_common.logging import configure_logging
from lv_common.sources import load_rows

__all__ = [
    "ColumnConfigurationError",
    "LVError",
    "RowSourceError",
    "SettingsError",
    "TableSettings",
    "configure_logging",
    "error_to_payload",
    "load_rows",
    "load_settings",
]
