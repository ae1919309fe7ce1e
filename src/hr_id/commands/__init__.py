"""Subcommand modules for hr-id."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from hr_id.commands.check import check
    from hr_id.commands.hash_cmd import hash_cmd
    from hr_id.commands.uuid_cmd import uuid_cmd

    cli.add_command(check)
    cli.add_command(uuid_cmd)
    cli.add_command(hash_cmd)
