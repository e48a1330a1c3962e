"""structlog setup shared by the httpi components."""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

_PROCESSORS: list[Any] = [
    structlog.contextvars.merge_contextvars,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.add_log_level,
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.JSONRenderer(),
]


def get_logger(name: str | None = None, *, component: str | None = None) -> Any:
    """Return a logger for ``name``, bound to ``component`` when one is given.

    structlog is configured with the default level on first use.
    """

    if not structlog.is_configured():
        configure_logging()

    logger = structlog.get_logger(name)
    if component is not None:
        return logger.bind(component=component)
    return logger


def configure_logging(level: str = "INFO") -> None:
    """Route structlog and stdlib logging to stderr as JSON lines."""

    threshold = logging.getLevelName(level.upper())
    if not isinstance(threshold, int):
        threshold = logging.INFO

    structlog.configure(
        processors=list(_PROCESSORS),
        wrapper_class=structlog.make_filtering_bound_logger(threshold),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(level=threshold, format="%(message)s", stream=sys.stderr)
