from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from rich.console import Console

from lv_common.api import TableSettings, configure_logging, load_settings
from lv_ui.tui.protocols import MessageSink, TablePresenter

__all__ = ["UIContext", "configure_logging"]


@dataclass
class UIContext:
    """Container for UI services and state, initialized lazily."""

    headless: bool = False
    settings_path: Optional[Path] = None

    _presenter: Optional[TablePresenter] = None
    _messages: Optional[MessageSink] = None
    _settings: Optional[TableSettings] = None

    @property
    def presenter(self) -> TablePresenter:
        if self._presenter is None:
            if self.headless:
                from lv_ui.tui.headless import HeadlessTablePresenter

                self._presenter = HeadlessTablePresenter()
            else:
                from lv_ui.tui.table import RichTablePresenter

                self._presenter = RichTablePresenter(Console())
        return self._presenter

    @presenter.setter
    def presenter(self, value: TablePresenter) -> None:
        self._presenter = value

    @property
    def messages(self) -> MessageSink:
        if self._messages is None:
            if self.headless:
                from lv_ui.tui.headless import HeadlessMessageSink

                self._messages = HeadlessMessageSink()
            else:
                from lv_ui.tui.table import RichMessageSink

                self._messages = RichMessageSink(Console(stderr=True))
        return self._messages

    @messages.setter
    def messages(self, value: MessageSink) -> None:
        self._messages = value

    @property
    def settings(self) -> TableSettings:
        if self._settings is None:
            self._settings = load_settings(self.settings_path)
        return self._settings

    @settings.setter
    def settings(self, value: TableSettings) -> None:
        self._settings = value

    def use_settings_file(self, path: Path) -> None:
        """Point at another settings file; it is read on next access."""
        self.settings_path = path
        self._settings = None
