"""Custom Click command class with --examples support.

When ``--examples`` is passed, the command prints usage examples and
exits. This keeps ``--help`` concise while making examples available.
"""

from __future__ import annotations

from typing import Any

import click


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class ShapekitCommand(click.Command):
    """Click Command that supports an ``--examples`` flag.

    Numeric commands pass ``allow_negative=True`` so that values such as
    ``-3`` are read as arguments rather than unknown short options.
    """

    def __init__(
        self,
        *args: Any,
        examples: str | None = None,
        allow_negative: bool = False,
        **kwargs: Any,
    ) -> None:
        if allow_negative:
            context_settings = dict(kwargs.pop("context_settings", None) or {})
            context_settings.setdefault("ignore_unknown_options", True)
            kwargs["context_settings"] = context_settings
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)
