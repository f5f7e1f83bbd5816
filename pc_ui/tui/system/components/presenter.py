from __future__ import annotations

from rich.console import Console

from pc_ui.tui.core import theme
from pc_ui.tui.core.protocols import Presenter


class RichPresenter(Presenter):
    def __init__(self, console: Console) -> None:
        self._console = console

    def _emit(self, level: str, message: str) -> None:
        self._console.print(theme.presenter_message(level, message))

    def info(self, message: str) -> None:
        self._emit("info", message)

    def error(self, message: str) -> None:
        self._emit("error", message)

    def block(self, markup: str) -> None:
        """Print pre-rendered markup without wrapping or highlighting."""
        self._console.print(markup, highlight=False, soft_wrap=True)
