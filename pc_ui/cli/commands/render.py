from __future__ import annotations

from typing import List, Optional

import typer

from pc_common.errors import PCError
from pc_ui.cli.commands.common import DEFAULT_SEPARATOR_TOKEN, build_choices
from pc_ui.tui.system.components.choice_list import choice_list_renderer
from pc_ui.tui.system.components.pagination import DEFAULT_PAGE_SIZE, paginate_output
from pc_ui.tui.system.models import RenderOptions
from pc_ui.wiring.dependencies import UIContext, load_page_size, load_paginate_default


def register_render_command(app: typer.Typer, ctx: UIContext) -> None:
    """Register the `render` command on the given Typer app."""

    @app.command("render")
    def render(
        values: List[str] = typer.Argument(..., help="Choice values, in display order."),
        cursor: int = typer.Option(0, "--cursor", "-c", help="Real index of the highlighted choice."),
        paginated: Optional[bool] = typer.Option(
            None,
            "--paginated/--no-paginated",
            help="Cut the list down to a scrolling window (default from PC_PAGINATE).",
        ),
        page_size: Optional[int] = typer.Option(
            None,
            "--page-size",
            min=1,
            help="Window height when paginated (default from PC_PAGE_SIZE, else 7).",
        ),
        separator_token: str = typer.Option(
            DEFAULT_SEPARATOR_TOKEN,
            "--separator-token",
            help="Values equal to this token are rendered as separators.",
        ),
    ) -> None:
        """Render the choices as a list prompt would draw them."""
        use_pagination = load_paginate_default() if paginated is None else paginated
        height = load_page_size() if page_size is None else page_size

        choices = build_choices(values, separator_token)
        render_fn = choice_list_renderer(choices)
        if use_pagination and height != DEFAULT_PAGE_SIZE:
            # set_render only paginates at the default height.
            render_fn = paginate_output(render_fn, height)
            use_pagination = False

        try:
            choices.set_render(render_fn, RenderOptions(paginated=use_pagination))
            output = choices.render(cursor)
        except PCError as exc:
            ctx.ui.present.error(str(exc))
            raise typer.Exit(1)

        ctx.ui.present.block(output)
