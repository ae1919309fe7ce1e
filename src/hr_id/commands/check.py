"""Command: validate candidate ids."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click
import structlog

from hr_id.domain.grammar import check_id
from hr_id.output.result import CommandError, CommandResult

if TYPE_CHECKING:
    from hr_id.commands._context import AppContext

logger = structlog.get_logger(logger=__name__)


def check_candidates(candidates: tuple[str, ...] | list[str]) -> CommandResult:
    """Run the grammar checker over *candidates* and summarize."""
    results: list[dict[str, Any]] = []
    invalid = 0
    for text in candidates:
        violation = check_id(text)
        if violation is None:
            results.append({"text": text, "valid": True})
            continue
        invalid += 1
        results.append(
            {
                "text": text,
                "valid": False,
                "rule": violation.rule.value,
                "message": violation.message,
            }
        )

    data = {"count": len(results), "invalid_count": invalid, "results": results}
    if invalid:
        return CommandResult(
            ok=False,
            op="check",
            data=data,
            error=CommandError(
                code="INVALID_ID",
                message=f"{invalid} of {len(results)} candidates rejected",
            ),
        )
    return CommandResult(ok=True, op="check", data=data)


@click.command()
@click.argument("candidates", nargs=-1, required=True)
@click.pass_obj
def check(app: AppContext, candidates: tuple[str, ...]) -> None:
    """Check whether each CANDIDATE is a legal id."""
    logger.debug("checking candidates", count=len(candidates))
    app.emit(check_candidates(candidates))
