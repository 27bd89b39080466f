"""Rich console and style names for human-readable output.

Renderers print into an in-memory console and hand back its text, so
``format_result`` stays a pure ``ServiceResult -> str`` function. Rich
drops colour on its own when stdout is not a terminal (pipes, CliRunner).
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

from toscatypes.domain.units import UnitCategory

DEFAULT_WIDTH = 120

_CATEGORY_COLOURS: dict[UnitCategory, str] = {
    UnitCategory.SIZE: "green",
    UnitCategory.FREQUENCY: "magenta",
    UnitCategory.DURATION: "cyan",
}

_SEVERITY_COLOURS: dict[str, str] = {
    "error": "bold red",
    "warning": "bold yellow",
}


def _category_style(category: str) -> str:
    return f"tosca.category.{category}"


def _severity_style(severity: str) -> str:
    return f"tosca.{severity}"


def _build_theme() -> Theme:
    styles = {
        "tosca.ok": "bold green",
        "tosca.op": "bold cyan",
        "tosca.key": "dim",
        "tosca.path": "bold blue",
        "tosca.value": "bold",
    }
    styles.update({_severity_style(s): c for s, c in _SEVERITY_COLOURS.items()})
    styles.update({_category_style(c): colour for c, colour in _CATEGORY_COLOURS.items()})
    return Theme(styles)


TOSCA_THEME = _build_theme()


def create_console(*, no_color: bool = False, width: int = DEFAULT_WIDTH) -> Console:
    """In-memory console using :data:`TOSCA_THEME`; read it back with :func:`get_output`."""
    return Console(
        file=StringIO(),
        theme=TOSCA_THEME,
        width=width,
        no_color=no_color,
        highlight=False,
    )


def get_output(console: Console) -> str:
    buffer = console.file
    if not isinstance(buffer, StringIO):
        msg = "console was not created by create_console()"
        raise TypeError(msg)
    return buffer.getvalue()


def style_for_category(category: str) -> str:
    """Theme style for a unit category name, or ``""`` when it has none."""
    return _category_style(category) if category in _CATEGORY_COLOURS else ""


def style_for_severity(severity: str) -> str:
    """Theme style for an issue severity, or ``""`` when it has none."""
    return _severity_style(severity) if severity in _SEVERITY_COLOURS else ""
