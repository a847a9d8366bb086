"""
Command-line interface for listview-pipeline.

Renders row files through the same sort/group/paginate pipeline the list
views use, either as rich tables or headless (recorded, for CI).
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from lv_ui.cli.commands.show import register_show_command
from lv_ui.cli.commands.views import register_views_command
from lv_ui.wiring.dependencies import UIContext, configure_logging

ctx_store = UIContext()

app = typer.Typer(help="Sort, group and paginate tabular row files.", no_args_is_help=True)


@app.callback(invoke_without_command=True)
def entry(
    ctx: typer.Context,
    headless: bool = typer.Option(
        False,
        "--headless",
        help="Record tables instead of drawing them (useful in CI).",
    ),
    settings: Optional[Path] = typer.Option(
        None,
        "--settings",
        help="YAML file with table settings.",
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging."),
) -> None:
    """Global entry point handling interactive vs headless modes."""
    configure_logging(debug=debug, force=True)
    ctx_store.headless = headless
    if settings is not None:
        ctx_store.use_settings_file(settings)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


register_show_command(app, ctx_store)
register_views_command(app, ctx_store)


def main() -> None:
    """Console script entrypoint (Typer app)."""
    app()


if __name__ == "__main__":
    main()
