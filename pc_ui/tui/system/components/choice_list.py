"""Default list rendering for a Choices collection."""

from __future__ import annotations

from rich.markup import escape

from pc_ui.tui.core import theme
from pc_ui.tui.system.choices import Choices
from pc_ui.tui.system.components.pagination import RenderFunc
from pc_ui.tui.system.models import is_separator


def render_choice_lines(choices: Choices, pointer: int) -> list[str]:
    """Return one rich-markup line per raw entry.

    ``pointer`` is a real index: it counts selectable choices only, so the
    highlighted row skips over separators.
    """
    lines: list[str] = []
    real_index = 0
    for entry in choices:
        if is_separator(entry):
            lines.append(theme.separator_row(escape(entry.line)))
            continue

        name = escape(entry.name)
        if entry.disabled:
            reason = escape(entry.disabled) if isinstance(entry.disabled, str) else None
            lines.append(theme.disabled_row(name, reason))
        elif real_index == pointer:
            lines.append(theme.pointer_row(name))
        else:
            lines.append(f"  {name}")
        real_index += 1
    return lines


def choice_list_renderer(choices: Choices) -> RenderFunc:
    """Build a ``render(pointer)`` function bound to ``choices``."""

    def render(pointer: int) -> str:
        return "\n".join(render_choice_lines(choices, pointer))

    return render
