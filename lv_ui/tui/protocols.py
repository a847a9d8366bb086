from typing import Protocol

from lv_ui.tui.models import TableModel


class TablePresenter(Protocol):
    def show(self, table: TableModel) -> None: ...


class MessageSink(Protocol):
    def emit(self, level: str, message: str) -> None: ...
