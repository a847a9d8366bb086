"""Table settings model and loader."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Mapping, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from lv_common.config.env import parse_page_size_env
from lv_common.errors import SettingsError, wrap_error

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE_OPTIONS = [10, 25, 50, 100]


class TableSettings(BaseModel):
    """Defaults applied to every table view that does not override them."""

    default_page_size: Optional[int] = Field(
        default=None,
        gt=0,
        description="Rows (or groups) per page in uncontrolled mode; None disables pagination",
    )
    page_size_options: List[int] = Field(
        default_factory=lambda: list(DEFAULT_PAGE_SIZE_OPTIONS),
        description="Choices offered by the page-size selector",
    )
    empty_message: str = Field(
        default="No data available",
        description="Message shown by presenters when a view has no rows",
    )
    page_window_neighbors: int = Field(
        default=1,
        ge=0,
        description="Page buttons shown on each side of the current page",
    )

    @field_validator("page_size_options")
    @classmethod
    def _validate_options(cls, value: List[int]) -> List[int]:
        if not value:
            raise ValueError("page_size_options must not be empty")
        if any(option <= 0 for option in value):
            raise ValueError("page_size_options must all be positive")
        return value


def _read_settings_file(path: Path) -> dict:
    try:
        data = yaml.safe_load(path.read_text()) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise wrap_error(
            SettingsError, f"Cannot read settings file {path}", context={"path": path}, cause=exc
        ) from exc
    if not isinstance(data, dict):
        raise SettingsError(
            "Settings file must contain a mapping", context={"path": path}
        )
    return data


def _apply_env(data: dict, env: Mapping[str, str]) -> None:
    raw_page_size = env.get("LV_PAGE_SIZE")
    if raw_page_size is not None:
        try:
            data["default_page_size"] = parse_page_size_env(raw_page_size)
        except ValueError as exc:
            raise wrap_error(
                SettingsError,
                "LV_PAGE_SIZE must be an integer",
                context={"value": raw_page_size},
                cause=exc,
            ) from exc
    empty_message = env.get("LV_EMPTY_MESSAGE")
    if empty_message:
        data["empty_message"] = empty_message


def load_settings(
    path: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> TableSettings:
    """Load settings from an optional YAML file, then apply env overrides."""
    data: dict = {}
    if path is not None:
        data.update(_read_settings_file(path))
        logger.debug("Loaded table settings from %s", path)
    _apply_env(data, os.environ if env is None else env)
    try:
        return TableSettings.model_validate(data)
    except ValidationError as exc:
        raise wrap_error(
            SettingsError, "Invalid table settings", context={"errors": exc.errors()}, cause=exc
        ) from exc
