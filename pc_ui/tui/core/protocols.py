from __future__ import annotations

from typing import Protocol

from pc_ui.tui.system.models import TableModel


class TablePresenter(Protocol):
    def show(self, table: TableModel) -> None: ...


class Presenter(Protocol):
    def info(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def block(self, markup: str) -> None: ...


class UI(Protocol):
    tables: TablePresenter
    present: Presenter
