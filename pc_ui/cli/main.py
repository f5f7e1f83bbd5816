"""
Command-line interface for prompt-choices.

Renders a list of choices the way a list prompt would, optionally through the
circular pagination window, and inspects the raw/real index spaces.
"""

from __future__ import annotations

import typer

from pc_ui.cli.commands.inspect import register_inspect_command
from pc_ui.cli.commands.render import register_render_command
from pc_ui.wiring.dependencies import UIContext, configure_logging

ctx_store = UIContext()

app = typer.Typer(help="Render and inspect prompt choice lists.", no_args_is_help=True)


@app.callback()
def entry(
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging."),
) -> None:
    """Configure logging before running a command."""
    configure_logging(debug=debug, force=True)


register_render_command(app, ctx_store)
register_inspect_command(app, ctx_store)


def main() -> None:
    """Console script entrypoint (Typer app)."""
    app()


if __name__ == "__main__":
    main()
