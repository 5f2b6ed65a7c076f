"""structlog configuration for rulebook.

Engine modules log through stdlib ``logging.getLogger(__name__)``; this
module routes those records through structlog processors.

Two output modes:
- Human (default): colored console output
- JSON (log_json=True): Structured JSON lines
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

from rulebook.config.settings import RulebookSettings, use_settings

LOGGER_NAME = "rulebook"


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Configure structlog processors and output routing.

    Args:
        verbose: Enable DEBUG-level output for ``rulebook`` loggers
            (per-call traversal summaries). When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
        stream: Where log lines go. Defaults to stderr.
    """
    out = stream if stream is not None else sys.stderr

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=out.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(out)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(LOGGER_NAME).setLevel(logging.DEBUG if verbose else logging.WARNING)


def configure_from_settings(
    settings: RulebookSettings | None = None,
    *,
    stream: TextIO | None = None,
) -> RulebookSettings:
    """One-call application setup: settings plus logging.

    Loads settings (env vars and the discovered ``rulebook.toml``) unless
    *settings* is given, installs them as the active settings so message
    overrides apply, and configures logging from their ``[logging]``
    section. Returns the installed settings.
    """
    active = settings if settings is not None else RulebookSettings.load()
    use_settings(active)
    configure_logging(
        verbose=active.logging.verbose,
        log_json=active.logging.log_json,
        stream=stream,
    )
    return active
