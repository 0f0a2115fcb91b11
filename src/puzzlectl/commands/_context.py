"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Owns input reading and centralized result emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from puzzlectl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from puzzlectl.config.settings import PuzzleSettings
    from puzzlectl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: PuzzleSettings) -> None:
        self.settings = settings

        from puzzlectl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from puzzlectl.services.telemetry import enable_telemetry

            enable_telemetry()

    def read_input(self, input_path: str) -> str:
        """Read puzzle text from *input_path*, or stdin when it is ``-``."""
        try:
            with click.open_file(input_path, encoding=self.settings.input.encoding) as fh:
                return fh.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise click.FileError(input_path, hint=str(exc)) from exc

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
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
            if not settings.json_output and not settings.quiet:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
