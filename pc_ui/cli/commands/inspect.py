from __future__ import annotations

from typing import List

import typer
from rich.markup import escape

from pc_ui.cli.commands.common import DEFAULT_SEPARATOR_TOKEN, build_choices
from pc_ui.tui.core import theme
from pc_ui.tui.system.choices import Choices
from pc_ui.tui.system.models import TableModel, is_separator
from pc_ui.wiring.dependencies import UIContext


def build_inspect_rows(choices: Choices) -> list[list[str]]:
    """One row per raw entry: raw index, real index, kind and escaped text."""
    rows: list[list[str]] = []
    real_index = 0
    for raw_index, entry in enumerate(choices):
        if is_separator(entry):
            rows.append([str(raw_index), "", theme.kind_text("separator"), escape(entry.line)])
            continue
        rows.append([str(raw_index), str(real_index), theme.kind_text("choice"), escape(entry.name)])
        real_index += 1
    return rows


def register_inspect_command(app: typer.Typer, ctx: UIContext) -> None:
    """Register the `inspect` command on the given Typer app."""

    @app.command("inspect")
    def inspect(
        values: List[str] = typer.Argument(..., help="Choice values, in display order."),
        separator_token: str = typer.Option(
            DEFAULT_SEPARATOR_TOKEN,
            "--separator-token",
            help="Values equal to this token are treated as separators.",
        ),
    ) -> None:
        """Show raw and real indices of every entry."""
        choices = build_choices(values, separator_token)

        ctx.ui.tables.show(
            TableModel(
                title="Choices",
                columns=["Raw", "Real", "Kind", "Text"],
                rows=build_inspect_rows(choices),
            )
        )
        ctx.ui.present.info(f"{choices.length} entries, {choices.real_length} selectable")
