"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from toscatypes.output.console import (
    create_console,
    get_output,
    style_for_category,
    style_for_severity,
)

if TYPE_CHECKING:
    from rich.console import Console

    from toscatypes.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    # Evaluated values only, one per line
    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(format_number(item.get("value")) for item in items)

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def format_number(value: Any) -> str:
    """Print whole floats without a trailing ``.0`` (10000000000.0 -> 10000000000)."""
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e18:
        return str(int(value))
    return str(value)


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="tosca.ok")
    op = Text(f"  {result.op}", style="tosca.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="tosca.key")
    if key == "path":
        v = Text(str(value), style="tosca.path")
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


def _value_table(items: list[dict[str, Any]], *, with_path: bool = False) -> Table:
    """Build a Rich Table of evaluated scalar-unit values."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    if with_path:
        table.add_column("Path", style="tosca.path", no_wrap=True)
    table.add_column("Input")
    table.add_column("Category")
    table.add_column("Value", style="tosca.value", justify="right")
    table.add_column("Unit", style="dim")

    for item in items:
        category = str(item.get("category", ""))
        value = item.get("timedelta") or format_number(item.get("value"))
        row: list[Any] = [
            str(item.get("raw", "")),
            Text(category, style=style_for_category(category)),
            value,
            "" if "timedelta" in item else str(item.get("base_unit", "")),
        ]
        if with_path:
            row.insert(0, str(item.get("path", "")))
        table.add_row(*row)

    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="tosca.error")
    op = Text(f"  {result.op}", style="tosca.op")
    sep = Text(" — ")
    code = Text(f"[{err.code}] " if err else "", style="tosca.warning")
    console.print(label, op, sep, code, Text(msg), sep="")

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Operation renderers ───────────────────────────────────────────────


def _render_evaluate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render evaluated scalars as a table."""
    items = result.data.get("items", [])
    console.print(_value_table(items))
    if verbose:
        for item in items:
            console.print(f"  {item['raw']}: literal={item['literal']} unit={item['unit']}")


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render check results, one line per issue with its location."""
    d = result.data
    issues = d.get("issues", [])
    count = d.get("count", len(issues))

    if count == 0:
        console.print(
            Text.assemble(
                ("OK", "tosca.ok"),
                f"  No issues found ({d.get('scalars', 0)} scalar-unit values"
                f" in {d.get('path', '?')}).",
            )
        )
    else:
        for issue in issues:
            sev = str(issue.get("severity", "warning"))
            line = issue.get("line")
            where = str(issue.get("path", "?")) + (f" (line {line})" if line else "")
            console.print(
                Text.assemble(
                    "  ",
                    (sev, style_for_severity(sev)),
                    " ",
                    (where, "tosca.path"),
                    f": {issue.get('kind', '')} {issue.get('message', '')}",
                )
            )
        console.print(f"\n{d.get('error_count', 0)} errors, {d.get('warning_count', 0)} warnings")

    values = d.get("values")
    if values:
        console.print()
        console.print(_value_table(values, with_path=True))


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "evaluate": _render_evaluate,
    "check": _render_check,
}
