"""
Choice collection and list pagination for interactive prompts.
"""

from pc_ui.tui.system.choices import Choices
from pc_ui.tui.system.components.choice_list import choice_list_renderer, render_choice_lines
from pc_ui.tui.system.components.pagination import DEFAULT_PAGE_SIZE, paginate_output
from pc_ui.tui.system.models import Choice, RenderOptions, Separator, is_selectable, is_separator

__all__ = [
    "Choices",
    "Choice",
    "Separator",
    "RenderOptions",
    "is_separator",
    "is_selectable",
    "paginate_output",
    "DEFAULT_PAGE_SIZE",
    "choice_list_renderer",
    "render_choice_lines",
]
