"""Rich renderers for ServiceResult.

Successful results print a status line followed by indented
``key: value`` fields. Failed results print the geometry error message.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text

from shapekit.output.console import create_console, get_output, style_for_value

if TYPE_CHECKING:
    from rich.console import Console

    from shapekit.services.result import ServiceResult


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()
    if result.ok:
        _render_ok(result, console)
    else:
        _render_error(result, console, verbose=verbose)
    if verbose:
        _render_meta(console, result)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"
    return f"OK: {result.op}"


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="sk.key")
    v = Text(str(value), style=style_for_value(key, value))
    console.print(k, v, sep="")


def _render_ok(result: ServiceResult, console: Console) -> None:
    console.print(Text("OK", style="sk.ok"), Text(f"  {result.op}", style="sk.op"), sep="")
    for key, value in result.data.items():
        _field(console, key, value)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(Text("ERROR", style="sk.error"), Text(f"  {result.op}", style="sk.op"), sep="")
    console.print(Text(f"  Geometry error: {msg}"))

    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"  {k}: {v}", style="dim"))


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print(Text("  meta:", style="dim"))
    telemetry = result.meta.get("telemetry")
    if telemetry:
        console.print(
            Text(f"    {telemetry['name']}  {telemetry['duration_ms']:.3f}ms", style="dim")
        )
    for k, v in result.meta.items():
        if k != "telemetry":
            console.print(Text(f"    {k}: {v}", style="dim"))
