"""Tests for logging configuration."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
import structlog

from lv_common.logging import configure_logging

pytestmark = pytest.mark.unit_common


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


def test_env_level_and_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, restore_root_logger
) -> None:
    log_file = tmp_path / "lv.log"
    monkeypatch.setenv("LV_LOG_LEVEL", "warning")
    monkeypatch.setenv("LV_LOG_FILE", str(log_file))
    monkeypatch.setenv("LV_LOG_JSON", "1")

    configure_logging(force=True)
    logging.getLogger("lv_core.test").warning("grouped %d rows", 3)
    for handler in restore_root_logger.handlers:
        handler.flush()

    assert restore_root_logger.level == logging.WARNING
    content = log_file.read_text()
    assert '"event": "grouped 3 rows"' in content


def test_debug_flag_wins(monkeypatch: pytest.MonkeyPatch, restore_root_logger) -> None:
    monkeypatch.setenv("LV_LOG_LEVEL", "error")
    monkeypatch.delenv("LV_LOG_FILE", raising=False)

    configure_logging(debug=True, force=True)

    assert restore_root_logger.level == logging.DEBUG
