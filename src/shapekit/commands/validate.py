"""Commands: validated construction, kind lookup, and area aggregation."""

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
  shapekit validate 10 5
  shapekit validate -- -3 5   # fails: Negative value not allowed: -3.0""",
)
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.pass_obj
def validate(app: AppContext, width: float, height: float) -> None:
    """Build a rectangle only if its WIDTH is positive."""
    app.emit(app.service.validate_rectangle(width, height))


@click.command(
    "total-area",
    cls=ShapekitCommand,
    examples="""\
  shapekit total-area -r 10x5 -r 7x7
  shapekit total-area             # no shapes: 0.0""",
)
@click.option(
    "-r",
    "--rect",
    "rects",
    multiple=True,
    metavar="WxH",
    help="Rectangle as WIDTHxHEIGHT (repeatable).",
)
@click.pass_obj
def total_area(app: AppContext, rects: tuple[str, ...]) -> None:
    """Sum the area of the given rectangles."""
    app.emit(app.service.total_area(list(rects)))


@click.command(
    cls=ShapekitCommand,
    examples="""\
  shapekit lookup circle
  shapekit lookup hexagon   # fails: Unknown shape: hexagon""",
)
@click.argument("name")
@click.pass_obj
def lookup(app: AppContext, name: str) -> None:
    """Check that NAME is a supported shape kind."""
    app.emit(app.service.lookup_kind(name))
