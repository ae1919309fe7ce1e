"""Command: stable content hash of an id."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from hr_id.domain.ids import Id
from hr_id.errors import ValidationError
from hr_id.hashing import content_hash_hex
from hr_id.output.result import CommandError, CommandResult

if TYPE_CHECKING:
    from hr_id.commands._context import AppContext


@click.command("hash")
@click.argument("text")
@click.option(
    "-a",
    "--algorithm",
    default=None,
    help="hashlib algorithm name (defaults to the configured algorithm).",
)
@click.pass_obj
def hash_cmd(app: AppContext, text: str, algorithm: str | None) -> None:
    """Print the hex content hash of id TEXT."""
    algorithm = algorithm or app.settings.hash_algorithm
    try:
        id_ = Id(text)
    except ValidationError as exc:
        app.emit(
            CommandResult(
                ok=False,
                op="hash",
                error=CommandError(
                    code="INVALID_ID",
                    message=str(exc),
                    detail={"rule": exc.rule.value},
                ),
            )
        )
        return

    try:
        digest = content_hash_hex(id_, algorithm)
    except (ValueError, TypeError) as exc:
        app.emit(
            CommandResult(
                ok=False,
                op="hash",
                error=CommandError(code="INVALID_ALGORITHM", message=str(exc)),
            )
        )
        return
    app.emit(
        CommandResult(
            ok=True,
            op="hash",
            data={"id": id_.as_str(), "algorithm": algorithm, "digest": digest},
        )
    )
