"""Structured logging for the hr-id CLI.

Events go straight to stderr through structlog's own print logger: a
console line by default, one JSON object per line with ``--log-json``.
Only the CLI layer logs; the library never reports rejected ids.

Loggers are obtained lazily as ``structlog.get_logger(logger=__name__)``
so the configuration chosen here applies even to module-level loggers.
"""

from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route CLI log events to stderr.

    Args:
        verbose: Emit DEBUG events; otherwise only WARNING and above.
        log_json: Render JSON lines instead of console lines.
    """
    renderer: structlog.typing.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer(ensure_ascii=False)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if verbose else logging.WARNING
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
