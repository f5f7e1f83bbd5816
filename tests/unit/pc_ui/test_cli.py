import pytest
from typer.testing import CliRunner

from pc_common.errors import ConfigurationError
from pc_ui.cli.commands import render as render_command
from pc_ui.cli.commands.inspect import build_inspect_rows
from pc_ui.cli.main import app
from pc_ui.tui.system.choices import Choices
from pc_ui.tui.system.models import Separator

pytestmark = pytest.mark.unit_ui

runner = CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("PC_PAGINATE", raising=False)
    monkeypatch.delenv("PC_PAGE_SIZE", raising=False)


def _values(count: int) -> list[str]:
    return [f"c{i}" for i in range(count)]


def test_render_full_list() -> None:
    result = runner.invoke(app, ["render", "a", "::", "b", "--cursor", "1"])

    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert lines[0] == "  a"
    assert "─" in lines[1]
    assert lines[2] == "❯ b"


def test_render_paginated_window() -> None:
    result = runner.invoke(app, ["render", *_values(10), "--paginated"])

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["  c7", "  c8", "  c9", "❯ c0", "  c1", "  c2", "  c3"]


def test_render_custom_page_size() -> None:
    result = runner.invoke(
        app, ["render", *_values(10), "--paginated", "--page-size", "3", "--cursor", "5"]
    )

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["  c2", "  c3", "  c4"]


def test_render_paginated_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("PC_PAGINATE", "yes")
    monkeypatch.setenv("PC_PAGE_SIZE", "4")

    result = runner.invoke(app, ["render", *_values(10)])

    assert result.exit_code == 0
    assert len(result.stdout.splitlines()) == 4


def test_render_no_paginated_overrides_environment(monkeypatch) -> None:
    monkeypatch.setenv("PC_PAGINATE", "1")

    result = runner.invoke(app, ["render", *_values(10), "--no-paginated"])

    assert result.exit_code == 0
    assert len(result.stdout.splitlines()) == 10


def test_render_custom_separator_token() -> None:
    result = runner.invoke(app, ["render", "a", "==", "b", "--separator-token", "=="])

    assert result.exit_code == 0
    assert "─" in result.stdout.splitlines()[1]


def test_inspect_reports_both_lengths() -> None:
    result = runner.invoke(app, ["inspect", "a", "::", "b"])

    assert result.exit_code == 0
    assert "3 entries, 2 selectable" in result.stdout
    assert "separator" in result.stdout


def test_inspect_rows_escape_separator_and_choice_text() -> None:
    choices = Choices(["[b]x", Separator("[dim]--"), "y"])

    rows = build_inspect_rows(choices)

    assert rows[0][:2] == ["0", "0"]
    assert rows[0][3] == "\\[b]x"
    assert rows[1][:2] == ["1", ""]
    assert rows[1][3] == "\\[dim]--"
    assert rows[2][:2] == ["2", "1"]


def test_render_reports_collection_errors(monkeypatch) -> None:
    def failing_renderer(choices):
        def render(pointer):
            raise ConfigurationError("render failed")

        return render

    monkeypatch.setattr(render_command, "choice_list_renderer", failing_renderer)

    result = runner.invoke(app, ["render", "a", "b"])

    assert result.exit_code == 1
    assert "render failed" in result.stdout
