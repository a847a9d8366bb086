from dataclasses import dataclass, field

from lv_ui.tui.models import TableModel
from lv_ui.tui.protocols import MessageSink, TablePresenter


@dataclass
class HeadlessTablePresenter(TablePresenter):
    """Records table models instead of drawing them (CI and tests)."""

    recorded_tables: list[TableModel] = field(default_factory=list)

    def show(self, table: TableModel) -> None:
        self.recorded_tables.append(table)

    @property
    def last(self) -> TableModel | None:
        return self.recorded_tables[-1] if self.recorded_tables else None


@dataclass
class HeadlessMessageSink(MessageSink):
    recorded_messages: list[tuple[str, str]] = field(default_factory=list)

    def emit(self, level: str, message: str) -> None:
        self.recorded_messages.append((level, message))
