from rich import box
from rich.console import Console
from rich.table import Table

from pc_ui.tui.core import theme
from pc_ui.tui.core.protocols import TablePresenter
from pc_ui.tui.system.models import TableModel


class RichTablePresenter(TablePresenter):
    def __init__(self, console: Console):
        self._console = console

    def show(self, table: TableModel) -> None:
        rich_table = Table(
            title=table.title,
            box=box.ROUNDED,
            border_style=theme.RICH_ACCENT,
            header_style=theme.RICH_ACCENT_BOLD,
            title_style=theme.RICH_ACCENT_BOLD,
        )
        for column in table.columns:
            rich_table.add_column(column, overflow="ellipsis")
        for row in table.rows:
            rich_table.add_row(*row)
        self._console.print(rich_table)
