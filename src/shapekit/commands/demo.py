"""Command: run the reference geometry scenario."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from shapekit.commands._base import ShapekitCommand

if TYPE_CHECKING:
    from shapekit.commands._context import AppContext


@click.command(
    cls=ShapekitCommand,
    examples="""\
  shapekit demo
  SHAPEKIT_DEMO__WIDTH=0 shapekit demo   # fails the width check""",
)
@click.pass_obj
def demo(app: AppContext) -> None:
    """Build a rectangle and a square, validate the width, and report areas.

    Inputs come from the [demo] section of shapekit.toml.
    """
    app.emit(app.service.process_geometry())
