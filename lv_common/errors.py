"""Shared error taxonomy for listview-pipeline."""

from __future__ import annotations

import dataclasses
from enum import Enum
from pathlib import PurePath
from typing import Any, Mapping, TypeVar


def _normalize_context_value(value: Any) -> Any:
    # Enum first: str-based enums such as SortDirection are also str.
    if isinstance(value, Enum):
        return _normalize_context_value(value.value)
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    if isinstance(value, PurePath):
        return value.as_posix()
    if isinstance(value, Mapping):
        return normalize_context(value)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        # Sort states, column descriptors and other records become field maps.
        return {
            f.name: _normalize_context_value(getattr(value, f.name))
            for f in dataclasses.fields(value)
            if not callable(getattr(value, f.name))
        }
    if isinstance(value, (set, frozenset)):
        return sorted((_normalize_context_value(item) for item in value), key=str)
    if isinstance(value, (list, tuple)):
        return [_normalize_context_value(item) for item in value]
    return str(value)


def normalize_context(context: Mapping[str, Any]) -> dict[str, Any]:
    """Return a JSON-friendly copy of an error context mapping."""
    return {str(key): _normalize_context_value(val) for key, val in context.items()}


class LVError(Exception):
    """Base error type for typed failure handling."""

    def __init__(
        self,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.context = normalize_context(context or {})
        if cause is not None:
            self.__cause__ = cause

    @property
    def error_type(self) -> str:
        return self.__class__.__name__

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.error_type, "message": str(self), "context": self.context}


class ColumnConfigurationError(LVError):
    """A column descriptor set cannot be used as declared."""


class RowSourceError(LVError):
    """Failure reading rows from a file or other source."""


class SettingsError(LVError):
    """Failure due to invalid table settings."""


T = TypeVar("T", bound=LVError)


def wrap_error(
    error_cls: type[T],
    message: str,
    *,
    context: Mapping[str, Any] | None = None,
    cause: Exception | None = None,
) -> T:
    """Create a typed LVError with optional context and cause."""
    return error_cls(message, context=context, cause=cause)


def error_to_payload(error: LVError) -> dict[str, Any]:
    """Convert an LVError to a JSON-ready payload."""
    return {
        "error_type": error.error_type,
        "error": str(error),
        "error_context": error.context,
    }
