"""structlog setup for labcheck.

structlog events and plain stdlib records share one stderr handler:
- Human (default): ``structlog.dev.ConsoleRenderer``
- JSON (--log-json): one JSON object per line

The ``labcheck`` logger tree is opened to DEBUG only in verbose mode.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

PROJECT_LOGGER = "labcheck"


def _shared_processors() -> list[structlog.types.Processor]:
    """Processors applied to both structlog and foreign (stdlib) records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(*, log_json: bool, stream: TextIO) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=stream.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Route structlog through a single stdlib handler.

    Safe to call repeatedly; the root handler list is replaced each time.

    Args:
        verbose: Open the ``labcheck`` loggers to DEBUG. Otherwise WARNING+.
        log_json: Render JSON lines instead of the console format.
        stream: Destination stream. Defaults to the current ``sys.stderr``.
    """
    stream = stream or sys.stderr
    shared = _shared_processors()

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json=log_json, stream=stream),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(logging.WARNING)
    logging.getLogger(PROJECT_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
