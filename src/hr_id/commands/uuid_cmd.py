"""Command: derive an id from a UUID."""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

import click

from hr_id.domain.ids import Id
from hr_id.output.result import CommandError, CommandResult

if TYPE_CHECKING:
    from hr_id.commands._context import AppContext


@click.command("uuid")
@click.argument("value", required=False)
@click.pass_obj
def uuid_cmd(app: AppContext, value: str | None) -> None:
    """Print the id for UUID VALUE, or for a fresh random UUID."""
    if value is None:
        app.emit(CommandResult(ok=True, op="uuid", data={"id": str(Id.new())}))
        return

    try:
        parsed = uuid.UUID(value)
    except ValueError:
        app.emit(
            CommandResult(
                ok=False,
                op="uuid",
                error=CommandError(
                    code="INVALID_UUID",
                    message=f"not a UUID: {value!r}",
                ),
            )
        )
        return
    app.emit(CommandResult(ok=True, op="uuid", data={"id": str(Id.from_uuid(parsed))}))
