from __future__ import annotations

from typing import Sequence

from pc_ui.tui.system.choices import Choices
from pc_ui.tui.system.models import Separator

DEFAULT_SEPARATOR_TOKEN = "::"


def build_choices(values: Sequence[str], separator_token: str = DEFAULT_SEPARATOR_TOKEN) -> Choices:
    """Build a collection where values equal to ``separator_token`` become separators."""
    return Choices(Separator() if value == separator_token else value for value in values)
