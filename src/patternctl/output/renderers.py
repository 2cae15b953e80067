"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO); the caller
extracts the text via ``get_output(console)``. Renderers are dispatched by
``result.op`` in :func:`render_result`. Unknown ops fall through to a
generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from patternctl.output.console import create_console, get_output, style_for_category

if TYPE_CHECKING:
    from rich.console import Console

    from patternctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
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
        return f"ERROR: {result.op}: {msg}"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="pc.ok")
    op = Text(f"  {result.op}", style="pc.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    if isinstance(value, (dict, list)):
        rendered = _json.dumps(value, separators=(",", ":"))
    else:
        rendered = str(value)
    console.print(Text.assemble((f"  {key}: ", "pc.key"), rendered))


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(Text(f"    {k}: {v}"))


def _scalar_fields(console: Console, data: dict[str, Any], skip: tuple[str, ...]) -> None:
    for key, value in data.items():
        if key not in skip:
            _field(console, key, value)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="pc.error")
    op = Text(f"  {result.op}", style="pc.op")
    code = Text(f" [{err.code}]" if err else "", style="pc.error")
    console.print(label, op, code, Text(": "), Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Scenario renderers ────────────────────────────────────────────────


def _render_catalog(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Pattern", style="bold")
    table.add_column("Category")
    table.add_column("Command", style="pc.op")
    if verbose:
        table.add_column("Module", style="dim")
    for item in result.data.get("items", []):
        row = [
            item["pattern"],
            Text(item["category"], style=style_for_category(item["category"])),
            item["command"],
        ]
        if verbose:
            row.append(item["module"])
        table.add_row(*row)
    console.print(table)


def _render_steps(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Gumball and remote runs: one table row per event or button press."""
    _status_line(console, result)
    steps = result.data.get("steps", [])
    if steps:
        table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
        columns = list(steps[0])
        for column in columns:
            table.add_column(column.replace("_", " ").title())
        for step in steps:
            cells: list[Any] = []
            for column in columns:
                value = step.get(column)
                if isinstance(value, bool):
                    style = "pc.accepted" if value else "pc.rejected"
                    cells.append(Text("yes" if value else "no", style=style))
                else:
                    cells.append("" if value is None else str(value))
            table.add_row(*cells)
        console.print(table)
    _scalar_fields(console, result.data, skip=("steps",))
    if verbose:
        _render_meta(console, result)


def _render_theater(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "title", result.data.get("title"))
    _field(console, "popcorn_batches", result.data.get("popcorn_batches"))
    during = result.data.get("during", {})
    after = result.data.get("after", {})
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Subsystem")
    table.add_column("Watching")
    table.add_column("After")
    for key in during:
        table.add_row(key, str(during[key]), str(after.get(key)))
    console.print(table)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    _scalar_fields(console, result.data, skip=())
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "catalog": _render_catalog,
    "run_gumball": _render_steps,
    "drive_remote": _render_steps,
    "watch_movie": _render_theater,
}
