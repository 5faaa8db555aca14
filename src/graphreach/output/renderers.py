"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console backed by StringIO. Renderers are
dispatched by ``result.op`` in :func:`render_result`; unknown ops fall
through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.text import Text

from graphreach.output.console import create_console, get_output

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from graphreach.services.result import ServiceResult

    type _Renderer = Callable[..., None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False, width: int = 120) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console(width=width)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render only the answer: a count, the values, or ``true``/``false``."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    data = result.data
    if "values" in data:
        return " ".join(str(v) for v in data["values"])
    for key in _ANSWER_KEYS:
        if key in data:
            value = data[key]
            return str(value).lower() if isinstance(value, bool) else str(value)
    return f"OK: {result.op}"


# Payload key holding the answer, per operation family.
_ANSWER_KEYS = ("count", "two_way", "exists", "found")


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="gr.ok"), Text(f"  {result.op}", style="gr.op"))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="gr.key")
    if isinstance(value, bool):
        v = Text("yes" if value else "no", style="gr.yes" if value else "gr.no")
    elif key in ("start", "end", "first", "second"):
        v = Text(str(value), style="gr.id")
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _render_warnings(console: Console, result: ServiceResult) -> None:
    for warning in result.warnings:
        console.print(Text("  warning: ", style="gr.warning"), Text(warning), sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block, including the telemetry span tree."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(Text(f"    {k}: {v}"))


def _render_telemetry_tree(console: Console, span_data: dict[str, Any], indent: int = 4) -> None:
    """Render a span tree with color-coded timing."""
    duration = span_data.get("duration_ms", 0.0)
    style = "bold red" if duration > 1000 else "yellow" if duration > 100 else "dim"

    line = Text(" " * indent)
    line.append(f"{duration:>8.2f}ms", style=style)
    line.append(f"  {span_data.get('name', '?')}")
    annotations = span_data.get("annotations") or {}
    if annotations:
        line.append(f"  ({', '.join(f'{k}={v}' for k, v in annotations.items())})")
    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="gr.error"),
        Text(f"  {result.op}", style="gr.op"),
        Text(" — "),
        Text(msg),
        sep="",
    )
    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_count(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "start", result.data.get("start"))
    _field(console, "count", result.data.get("count", 0))
    _render_warnings(console, result)
    if verbose:
        _render_meta(console, result)


def _render_values(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render sorted reachable values as one comma-separated line."""
    _status_line(console, result)
    _field(console, "start", result.data.get("start"))
    _field(console, "count", result.data.get("count", 0))
    values = Text("  values: ", style="gr.key")
    values.append(", ".join(str(v) for v in result.data.get("values", [])), style="gr.value")
    console.print(values)
    _render_warnings(console, result)
    if verbose:
        _render_meta(console, result)


def _render_answer(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render yes/no answers (two-way, positive path, network search)."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    _render_warnings(console, result)
    if verbose:
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    _render_warnings(console, result)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, _Renderer] = {
    "odd_vertices": _render_count,
    "sorted_reachable": _render_values,
    "sorted_reachable_map": _render_values,
    "two_way": _render_answer,
    "positive_path": _render_answer,
    "network_search": _render_answer,
}
