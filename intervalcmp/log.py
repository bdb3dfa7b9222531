"""Structured logging setup.

Loggers always sit on top of stdlib ``logging``, so an application that never
calls :func:`configure_logging` gets stdlib's defaults: records below WARNING
are dropped and nothing reaches stdout.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable

import structlog

PACKAGE_LOGGER = "intervalcmp"


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger wrapping the stdlib logger ``name``."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(
    handlers: Iterable[logging.Handler] | None = None,
    level: int = logging.INFO,
) -> None:
    """Configure the package logger and structlog with JSON output on stderr.

    Only the ``intervalcmp`` logger is touched; root handlers installed by a
    host application are left alone.
    """

    if handlers is None:
        handlers = [logging.StreamHandler(sys.stderr)]

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
    for handler in handlers:
        handler.setFormatter(logging.Formatter("%(message)s"))
        package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
