"""
Logging configuration for playlist-duration.

This module configures structlog on top of stdlib logging. JSON output is the
default; ``LOG_FORMAT=console`` switches to the human-readable renderer.
"""

from __future__ import annotations

import logging
import sys

import structlog

from .settings import Settings, settings


def configure_logging(config: Settings | None = None) -> None:
    """Configure structlog and the stdlib root handler."""
    config = config or settings
    level = logging.getLevelName(config.log_level)
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level, force=True)

    renderer = (
        structlog.dev.ConsoleRenderer(colors=False)
        if config.log_format == "console"
        else structlog.processors.JSONRenderer()
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str, **context: object) -> structlog.stdlib.BoundLogger:
    """Get a logger bound with service context plus any extra keys.

    The logger stays lazy until first use, so module-level loggers pick up
    whatever :func:`configure_logging` installed later.
    """
    return structlog.get_logger(name, service="playlist-duration", env=settings.env, **context)
