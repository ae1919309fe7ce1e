"""Root CLI group for hr-id with global flags and command registration."""

from __future__ import annotations

import click

from hr_id import __version__
from hr_id.commands import register_commands
from hr_id.commands._context import AppContext
from hr_id.config.settings import HrIdSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="hr-id")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """hr-id — validate and derive human-readable ids."""
    settings = HrIdSettings.from_cli(
        config_path=config_path,
        json_output=json_output or None,
        verbose=verbose or None,
        log_json=log_json or None,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
