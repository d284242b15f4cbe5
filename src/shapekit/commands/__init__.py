"""Subcommand modules for shapekit.

Provides register_commands() which uses deferred imports to keep
``shapekit --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all commands on the root CLI group."""
    from shapekit.commands.demo import demo
    from shapekit.commands.shapes import describe, dimension, rectangle, square
    from shapekit.commands.validate import lookup, total_area, validate

    cli.add_command(rectangle)
    cli.add_command(square)
    cli.add_command(dimension)
    cli.add_command(describe)
    cli.add_command(validate)
    cli.add_command(total_area)
    cli.add_command(lookup)
    cli.add_command(demo)
