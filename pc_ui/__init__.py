"""Prompt-side building blocks: the choices collection, pagination and CLI."""

from pc_ui.tui import Choice, Choices, Separator, paginate_output

__all__ = ["Choices", "Choice", "Separator", "paginate_output"]
