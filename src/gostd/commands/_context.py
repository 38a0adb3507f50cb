"""AppContext: shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``.  Builds the archive source and service lazily so
``--help`` and ``--version`` never touch git or the filesystem, and
centralizes result emission (stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gostd.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from gostd.config.settings import GostdSettings
    from gostd.services.result import ServiceResult
    from gostd.services.stdlib import StdlibService


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: GostdSettings) -> None:
        self.settings = settings
        self._service: StdlibService | None = None

        from gostd.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from gostd.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def service(self) -> StdlibService:
        """The stdlib service (created on first access)."""
        if self._service is None:
            from gostd.infrastructure.sources import source_from_config
            from gostd.services.stdlib import StdlibService

            self._service = StdlibService(
                source_from_config(self.settings.source),
                labels=self.settings.tags.prerelease_labels,
            )
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout and returns.  Warnings go to stderr so
          they don't pollute piped output.
        * Failure: writes to stderr and exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # JSON output already carries warnings in the payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
