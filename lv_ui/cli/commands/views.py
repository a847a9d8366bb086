from __future__ import annotations

import typer

from lv_core.views import VIEWS, view_names
from lv_ui.presenters.views import build_views_table
from lv_ui.wiring.dependencies import UIContext


def register_views_command(app: typer.Typer, ctx: UIContext) -> None:
    @app.command("views")
    def list_views() -> None:
        """List the prebuilt views accepted by `show --view`."""
        ctx.presenter.show(build_views_table([VIEWS[name] for name in view_names()]))
