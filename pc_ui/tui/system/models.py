from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Mapping, Union

from pydantic import BaseModel, ConfigDict

SEPARATOR_TYPE = "separator"
CHOICE_TYPE = "choice"

DEFAULT_SEPARATOR_LINE = "─" * 14

_CHOICE_FIELDS = ("name", "value", "short", "disabled", "checked")


@dataclass(frozen=True)
class Separator:
    """Visual divider between choices. Never selectable."""

    line: str = DEFAULT_SEPARATOR_LINE
    type: Literal["separator"] = SEPARATOR_TYPE

    def __str__(self) -> str:
        return self.line


@dataclass(frozen=True)
class Choice:
    name: str = ""
    value: Any = field(default=None, hash=False)
    short: str = ""
    disabled: bool | str = False
    checked: bool = False
    extras: Mapping[str, Any] = field(default_factory=dict, hash=False)
    type: Literal["choice"] = CHOICE_TYPE

    @classmethod
    def from_value(cls, val: Any) -> "Choice":
        """Wrap a raw prompt value into a Choice.

        Scalars become a choice whose name and short form are their text and
        whose value is the raw value itself. Mappings may provide ``name``,
        ``value``, ``short``, ``disabled`` and ``checked``; ``value`` and
        ``short`` default to ``name``. Any other keys are kept in ``extras``.
        """
        if isinstance(val, Choice):
            return val
        if isinstance(val, Mapping):
            name = str(val.get("name", ""))
            extras = {k: v for k, v in val.items() if k not in _CHOICE_FIELDS}
            return cls(
                name=name,
                value=val.get("value", val.get("name", "")),
                short=str(val.get("short", name)),
                disabled=val.get("disabled", False),
                checked=bool(val.get("checked", False)),
                extras=extras,
            )
        return cls(name=str(val), value=val, short=str(val))

    def get(self, attr: str, default: Any = None) -> Any:
        """Read a declared field, falling back to ``extras``."""
        if attr in _CHOICE_FIELDS or attr == "type":
            return getattr(self, attr)
        return self.extras.get(attr, default)

    def __str__(self) -> str:
        return self.name


Entry = Union[Choice, Separator]


def is_separator(entry: Any) -> bool:
    return getattr(entry, "type", None) == SEPARATOR_TYPE


def is_selectable(entry: Any) -> bool:
    """Filter predicate keeping everything that is not a separator."""
    return not is_separator(entry)


class RenderOptions(BaseModel):
    """Options accepted by ``Choices.set_render``."""

    paginated: bool = False

    model_config = ConfigDict(extra="ignore", frozen=True)


@dataclass
class TableModel:
    title: str
    columns: list[str]
    rows: list[list[str]]
