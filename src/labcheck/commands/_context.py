"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides the RuleService and centralized result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from labcheck.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from labcheck.config.settings import LabSettings
    from labcheck.services.result import ServiceResult
    from labcheck.services.rules import RuleService


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: LabSettings) -> None:
        self.settings = settings
        self._rules: RuleService | None = None

        from labcheck.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from labcheck.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def rules(self) -> RuleService:
        """The rule service (created lazily on first access)."""
        if self._rules is None:
            from labcheck.services.rules import RuleService

            self._rules = RuleService(self.settings.tax)
        return self._rules

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            decimals=self.settings.output.decimals,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output and not settings.quiet:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
