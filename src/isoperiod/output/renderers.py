"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from isoperiod.domain.period import COMPONENTS
from isoperiod.output.console import create_console, get_output, style_for_value

if TYPE_CHECKING:
    from rich.console import Console

    from isoperiod.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult, *, verbose: bool = False, width: int | None = None
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console(width=width)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: canonical text only."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item.get("period", "")) for item in items)

    return str(result.data.get("period", f"OK: {result.op}"))


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    console.print(Text("OK", style="period.ok"), Text(f"  {result.op}", style="period.op"))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="period.key")
    if key == "period":
        v = Text(str(value), style="period.text")
    elif key == "input":
        v = Text(str(value), style="period.input")
    else:
        v = Text(str(value))
    console.print(k + v)


def _components_table(components: dict[str, Any]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    for name in COMPONENTS:
        table.add_column(name.title(), justify="right")
    table.add_column("Sign", justify="center")
    cells = [
        Text(str(components[name]), style=style_for_value(components[name]))
        for name in COMPONENTS
    ]
    sign = Text("-", style="period.negative") if components.get("negative") else Text("+")
    table.add_row(*cells, sign)
    return table


def _check_table(items: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Input", style="period.input", no_wrap=True)
    table.add_column("Status")
    table.add_column("Period / Error")
    for item in items:
        if item.get("valid"):
            table.add_row(
                str(item["input"]),
                Text("valid", style="period.ok"),
                Text(str(item.get("period", "")), style="period.text"),
            )
        else:
            table.add_row(
                str(item["input"]),
                Text("invalid", style="period.error"),
                str(item.get("code", "")),
            )
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="period.error")
    op = Text(f"  {result.op}", style="period.op")
    console.print(label, op, Text(" — "), msg, markup=False)

    if err is None or not err.detail:
        return

    items = err.detail.get("items")
    if isinstance(items, list):
        console.print(_check_table(items))
        if verbose:
            for item in items:
                if not item.get("valid"):
                    console.print(f"  {item['input']}: {item['message']}", markup=False)
    elif verbose:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}", markup=False)


# ── Success renderers ─────────────────────────────────────────────────


def _render_period(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render parse/negate results: canonical text plus component table."""
    _status_line(console, result)
    for key in ("input", "period", "normalised"):
        if key in result.data:
            _field(console, key, result.data[key])
    components = result.data.get("components")
    if components:
        console.print(_components_table(components))


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    console.print(_check_table(items))
    console.print(f"\n[period.ok]OK[/period.ok]  {result.data.get('count', len(items))} valid")


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "parse": _render_period,
    "negate": _render_period,
    "check": _render_check,
}
