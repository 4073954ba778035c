"""structlog setup for rationals.

Loggers wrap the stdlib ``rationals`` logger, which carries a ``NullHandler``
so the library stays silent until :func:`configure_logging` is called.
"""
from __future__ import annotations

import logging
import sys

import structlog

LOGGER_NAME = "rationals"

_SHARED_PROCESSORS: list = [
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str = LOGGER_NAME) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger backed by the stdlib logger *name*."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> logging.Handler:
    """Route ``rationals`` log records to stderr.

    Args:
        verbose: Enable DEBUG-level output. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.

    Returns the installed handler so callers can detach it again.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_SHARED_PROCESSORS,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    logger = logging.getLogger(LOGGER_NAME)
    for existing in list(logger.handlers):
        if isinstance(existing, logging.StreamHandler) and isinstance(
            existing.formatter, structlog.stdlib.ProcessorFormatter
        ):
            logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler


__all__ = ["LOGGER_NAME", "get_logger", "configure_logging"]
