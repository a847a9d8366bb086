"""Terminal rendering for list views."""

from lv_ui.tui.headless import HeadlessMessageSink, HeadlessTablePresenter
from lv_ui.tui.models import TableModel
from lv_ui.tui.table import RichMessageSink, RichTablePresenter

__all__ = [
    "HeadlessMessageSink",
    "HeadlessTablePresenter",
    "RichMessageSink",
    "RichTablePresenter",
    "TableModel",
]
