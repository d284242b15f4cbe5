"""AppContext: shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Owns logging setup and result emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from shapekit.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from shapekit.config.settings import ShapekitSettings
    from shapekit.services.geometry import GeometryService
    from shapekit.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: ShapekitSettings) -> None:
        self.settings = settings
        self._service: GeometryService | None = None

        from shapekit.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from shapekit.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def service(self) -> GeometryService:
        """The geometry service (created lazily on first access)."""
        if self._service is None:
            from shapekit.services.geometry import GeometryService

            self._service = GeometryService(self.settings)
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout. Warnings go to stderr so they
          don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
