"""Parsing of LV_* environment overrides."""

from __future__ import annotations

_TRUE_TOKENS = frozenset({"1", "true", "yes", "on"})
# Values that switch pagination off instead of naming a page size.
PAGE_SIZE_DISABLED_TOKENS = frozenset({"", "0", "none", "off", "disabled"})


def parse_bool_env(value: str | None) -> bool | None:
    """Parse a boolean flag such as ``LV_LOG_JSON``.

    Returns None when the variable is unset.
    """
    if value is None:
        return None
    return value.strip().lower() in _TRUE_TOKENS


def parse_int_env(value: str | None) -> int | None:
    """Parse an integer, or None when unset or not a number."""
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


def parse_page_size_env(value: str) -> int | None:
    """Parse ``LV_PAGE_SIZE``: an integer, or None for a disabled token.

    Raises ValueError when the value is neither.
    """
    if value.strip().lower() in PAGE_SIZE_DISABLED_TOKENS:
        return None
    size = parse_int_env(value)
    if size is None:
        raise ValueError(f"not a page size: {value!r}")
    return size
