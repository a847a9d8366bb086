"""Configuration helpers for lv_common."""

from .env import parse_bool_env, parse_int_env, parse_page_size_env
from .settings import DEFAULT_PAGE_SIZE_OPTIONS, TableSettings, load_settings

__all__ = [
    "DEFAULT_PAGE_SIZE_OPTIONS",
    "TableSettings",
    "load_settings",
    "parse_bool_env",
    "parse_int_env",
    "parse_page_size_env",
]
