"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Centralizes result emission (stdout/stderr routing
and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
import structlog

from hr_id.output.formatters import format_result

if TYPE_CHECKING:
    from hr_id.config.settings import HrIdSettings
    from hr_id.output.result import CommandResult

logger = structlog.get_logger(logger=__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: HrIdSettings) -> None:
        self.settings = settings

        from hr_id.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        logger.debug(
            "settings loaded",
            config_path=str(settings.config_path) if settings.config_path else None,
            hash_algorithm=settings.hash_algorithm,
        )

    def emit(self, result: CommandResult) -> None:
        """Format and output a CommandResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        output = format_result(result, json_output=self.settings.json_output)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
