from __future__ import annotations

RICH_ACCENT = "cyan"
RICH_ACCENT_BOLD = f"bold {RICH_ACCENT}"

POINTER = "❯"
POINTER_STYLE = RICH_ACCENT
SEPARATOR_STYLE = "dim"
DISABLED_STYLE = "dim"
DISABLED_SUFFIX = "(Disabled)"

KIND_COLORS: dict[str, str] = {
    "choice": "green",
    "separator": "dim",
}


def pointer_row(name: str) -> str:
    return f"[{POINTER_STYLE}]{POINTER} {name}[/{POINTER_STYLE}]"


def separator_row(line: str) -> str:
    if not line:
        return ""
    return f"  [{SEPARATOR_STYLE}]{line}[/{SEPARATOR_STYLE}]"


def disabled_row(name: str, reason: str | None = None) -> str:
    suffix = f"({reason})" if reason else DISABLED_SUFFIX
    return f"  [{DISABLED_STYLE}]- {name} {suffix}[/{DISABLED_STYLE}]"


def kind_text(kind: str) -> str:
    color = KIND_COLORS.get(kind)
    if not color:
        return kind
    return f"[{color}]{kind}[/{color}]"


PRESENTER_TEMPLATES: dict[str, str] = {
    "info": "[blue]ℹ[/blue] {message}",
    "error": "[red]✖ {message}[/red]",
}


def presenter_message(level: str, message: str) -> str:
    template = PRESENTER_TEMPLATES.get(level, "{message}")
    return template.format(message=message)
