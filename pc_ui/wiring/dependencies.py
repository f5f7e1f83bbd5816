from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from pc_common.config.env import parse_bool_env, parse_int_env
from pc_common.logging import configure_logging
from pc_ui.tui.core.protocols import UI
from pc_ui.tui.system.components.pagination import DEFAULT_PAGE_SIZE

__all__ = ["UIContext", "configure_logging", "load_paginate_default", "load_page_size"]


def load_paginate_default() -> bool:
    """Default for ``--paginated`` taken from ``PC_PAGINATE``."""
    return bool(parse_bool_env(os.environ.get("PC_PAGINATE")))


def load_page_size() -> int:
    """Page height taken from ``PC_PAGE_SIZE``, ignoring unusable values."""
    value = parse_int_env(os.environ.get("PC_PAGE_SIZE"))
    if value is None or value < 1:
        return DEFAULT_PAGE_SIZE
    return value


@dataclass
class UIContext:
    """Container for UI services, initialized lazily."""

    _ui: Optional[UI] = None

    @property
    def ui(self) -> UI:
        if self._ui is None:
            from pc_ui.tui.system.facade import TUI

            self._ui = TUI()
        return self._ui

    @ui.setter
    def ui(self, value: UI):
        self._ui = value
