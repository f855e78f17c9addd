"""Structured logging configuration using structlog.

Matcher evaluations log at debug, registry changes at info. Output goes to
stderr so pytest's capture shows it next to the failing test.
"""

from __future__ import annotations

import logging
import sys

import structlog

_RENDERERS = {
    "json": structlog.processors.JSONRenderer,
    "console": structlog.dev.ConsoleRenderer,
}


def setup_logging(level: str = "warning", fmt: str = "json") -> None:
    """Configure structlog output to stderr as JSON or console lines."""
    log_level = getattr(logging, level.upper(), logging.WARNING)
    renderer = _RENDERERS.get(fmt, structlog.processors.JSONRenderer)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso", utc=True, key="ts"),
            renderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(component: str) -> structlog.stdlib.BoundLogger:
    """Get a logger bound with the package and a component name."""
    return structlog.get_logger(package="changecollection", component=component)  # type: ignore[return-value]
