"""Rich Console factory and theme for shapekit output.

Consoles render to a StringIO buffer so renderers keep a
``render_result() -> str`` contract. In non-TTY environments
(tests, pipes) Rich disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

SHAPEKIT_THEME = Theme(
    {
        "sk.ok": "bold green",
        "sk.error": "bold red",
        "sk.warning": "bold yellow",
        "sk.op": "bold cyan",
        "sk.key": "dim",
        "sk.number": "magenta",
        "sk.color": "blue",
        "sk.bool.true": "green",
        "sk.bool.false": "yellow",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (stable output in tests).
    """
    return Console(
        file=StringIO(),
        theme=SHAPEKIT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_value(key: str, value: object) -> str:
    """Return the Rich style name for a result field."""
    if isinstance(value, bool):
        return "sk.bool.true" if value else "sk.bool.false"
    if isinstance(value, (int, float)):
        return "sk.number"
    if key.endswith("color"):
        return "sk.color"
    return ""
