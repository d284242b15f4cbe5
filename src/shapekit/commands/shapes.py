"""Commands: unvalidated shape construction and inspection."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from shapekit.commands._base import ShapekitCommand

if TYPE_CHECKING:
    from shapekit.commands._context import AppContext


@click.command(
    cls=ShapekitCommand,
    allow_negative=True,
    examples="""\
  shapekit rectangle 10 5
  shapekit --json rectangle 2.5 4""",
)
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.pass_obj
def rectangle(app: AppContext, width: float, height: float) -> None:
    """Build a rectangle and show its area, perimeter, and square test."""
    app.emit(app.service.build_rectangle(width, height))


@click.command(
    cls=ShapekitCommand,
    allow_negative=True,
    examples="""\
  shapekit square 7""",
)
@click.argument("side", type=float)
@click.pass_obj
def square(app: AppContext, side: float) -> None:
    """Build a square with the given SIDE."""
    app.emit(app.service.build_square(side))


@click.command(
    cls=ShapekitCommand,
    allow_negative=True,
    examples="""\
  shapekit dimension 10 5 width
  shapekit dimension 10 5 depth   # unknown keys read as 0.0""",
)
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.argument("key")
@click.pass_obj
def dimension(app: AppContext, width: float, height: float, key: str) -> None:
    """Read one dimension of a WIDTH x HEIGHT rectangle by KEY."""
    app.emit(app.service.dimension(width, height, key))


@click.command(
    cls=ShapekitCommand,
    examples="""\
  shapekit describe widget
  shapekit describe widget --color red""",
)
@click.argument("name")
@click.option("--color", default=None, help="Shape color (default: configured fill color).")
@click.pass_obj
def describe(app: AppContext, name: str, color: str | None) -> None:
    """Describe a base shape with no geometry (area is always 0)."""
    app.emit(app.service.describe_shape(name, color))
