"""Choices collection backing list-style prompts.

Entries live in two index spaces: the raw index covers every entry including
separators, the real index only covers selectable choices. The selectable view
is rebuilt from the raw entries after every mutation.
"""

from __future__ import annotations

import logging
from numbers import Integral
from typing import Any, Callable, Iterable, Iterator, Mapping

from pydantic import ValidationError

from pc_common.errors import ConfigurationError, InvariantViolation, wrap_error
from pc_ui.tui.system.components.pagination import RenderFunc, paginate_output
from pc_ui.tui.system.models import (
    Choice,
    Entry,
    RenderOptions,
    Separator,
    is_selectable,
    is_separator,
)

logger = logging.getLogger(__name__)

_MISSING = object()


def _wrap(val: Any) -> Entry:
    if is_separator(val):
        return val
    return Choice.from_value(val)


def _valid_index(selector: Any) -> bool:
    return isinstance(selector, Integral) and not isinstance(selector, bool)


class Choices:
    """Ordered collection of choices and separators."""

    def __init__(self, choices: Iterable[Any] = ()) -> None:
        self._choices: list[Entry] = [_wrap(val) for val in choices]
        self._real_choices: list[Entry] = []
        self._rendering_method: RenderFunc | None = None
        self._refresh()

    def _refresh(self) -> None:
        self._real_choices = [entry for entry in self._choices if is_selectable(entry)]
        logger.debug(
            "Choices refreshed: %d entries, %d selectable",
            len(self._choices),
            len(self._real_choices),
        )

    @property
    def choices(self) -> tuple[Entry, ...]:
        """Every entry in raw order, separators included."""
        return tuple(self._choices)

    @property
    def real_choices(self) -> tuple[Entry, ...]:
        """Selectable entries only, in raw order."""
        return tuple(self._real_choices)

    def __len__(self) -> int:
        return len(self._choices)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._choices)

    @property
    def length(self) -> int:
        return len(self._choices)

    @length.setter
    def length(self, value: int) -> None:
        if value < len(self._choices):
            self.truncate(value)
        else:
            self.grow(value)

    @property
    def real_length(self) -> int:
        return len(self._real_choices)

    @real_length.setter
    def real_length(self, value: int) -> None:
        raise InvariantViolation(
            "Cannot set `real_length` of a Choices collection",
            context={"requested": value, "real_length": len(self._real_choices)},
        )

    def truncate(self, length: int) -> None:
        """Drop raw entries past ``length``."""
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        del self._choices[length:]
        self._refresh()

    def grow(self, length: int) -> None:
        """Pad the raw entries with blank separators up to ``length``."""
        missing = length - len(self._choices)
        if missing > 0:
            self._choices.extend(Separator("") for _ in range(missing))
        self._refresh()

    def get_choice(self, selector: Any) -> Entry | None:
        """Return the selectable choice at ``selector`` or None."""
        if _valid_index(selector) and 0 <= selector < len(self._real_choices):
            return self._real_choices[selector]
        return None

    def get(self, selector: Any) -> Entry | None:
        """Return the raw entry (choice or separator) at ``selector`` or None."""
        if _valid_index(selector) and 0 <= selector < len(self._choices):
            return self._choices[selector]
        return None

    def where(self, clause: Mapping[str, Any]) -> list[Entry]:
        """Return selectable choices whose attributes equal every key of ``clause``."""
        if not clause:
            return []
        return [
            entry
            for entry in self._real_choices
            if all(entry.get(key, _MISSING) == expected for key, expected in clause.items())
        ]

    def pluck(self, name: str) -> list[Any]:
        return [entry.get(name) for entry in self._real_choices]

    def for_each(self, func: Callable[[Entry, int], Any]) -> None:
        for index, entry in enumerate(self._choices):
            func(entry, index)

    def filter(self, predicate: Callable[[Entry], Any]) -> list[Entry]:
        return [entry for entry in self._choices if predicate(entry)]

    def push(self, *values: Any) -> tuple[Entry, ...]:
        """Append values as choices. Values are never treated as separators here."""
        self._choices.extend(Choice.from_value(val) for val in values)
        self._refresh()
        return self.choices

    def render(self, *args: Any, **kwargs: Any) -> str:
        """Render the choices with the configured rendering method."""
        if self._rendering_method is None:
            raise ConfigurationError("No rendering method set, call set_render() first")
        return self._rendering_method(*args, **kwargs)

    def set_render(
        self,
        render: RenderFunc,
        options: RenderOptions | Mapping[str, Any] | None = None,
    ) -> None:
        """Set the rendering method.

        Pass ``{"paginated": True}`` to cut the output down to a scrolling window.
        """
        opts = self._resolve_options(options)
        self._rendering_method = self.paginate_output(render) if opts.paginated else render

    def paginate_output(self, render: RenderFunc) -> RenderFunc:
        return paginate_output(render)

    @staticmethod
    def _resolve_options(
        options: RenderOptions | Mapping[str, Any] | None,
    ) -> RenderOptions:
        if options is None:
            return RenderOptions()
        if isinstance(options, RenderOptions):
            return options
        try:
            return RenderOptions.model_validate(dict(options))
        except ValidationError as exc:
            raise wrap_error(
                ConfigurationError,
                "Invalid render options",
                context={"options": dict(options)},
                cause=exc,
            ) from exc

    def __repr__(self) -> str:
        return f"Choices(length={len(self._choices)}, real_length={len(self._real_choices)})"
