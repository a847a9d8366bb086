from rich.console import Console

from lv_ui.tui import theme
from lv_ui.tui.models import TableModel
from lv_ui.tui.protocols import TablePresenter
from lv_ui.tui.table_layout import build_rich_table


class RichTablePresenter(TablePresenter):
    def __init__(self, console: Console):
        self._console = console

    def show(self, table: TableModel) -> None:
        rich_table = build_rich_table(
            table,
            console=self._console,
            border_style=theme.RICH_BORDER_STYLE,
            header_style=theme.RICH_ACCENT_BOLD,
            title_style=theme.RICH_ACCENT_BOLD,
        )
        self._console.print(rich_table)


class RichMessageSink:
    def __init__(self, console: Console) -> None:
        self._console = console

    def emit(self, level: str, message: str) -> None:
        template = theme.MESSAGE_TEMPLATES.get(level, "{message}")
        self._console.print(template.format(message=message))
