"""Structured logging helpers."""

from __future__ import annotations

import logging
from typing import TextIO

import structlog


def configure_logging(
    level: int | str = logging.INFO,
    stream: TextIO | None = None,
    *,
    environment: str = "prod",
) -> None:
    """Route structlog output to ``stream``.

    Development sessions get the human-readable console renderer; every other
    environment emits one JSON object per line.
    """

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[logging.StreamHandler(stream)],
    )
    processors = [
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
    ]
    if environment == "dev":
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    else:
        processors.extend([structlog.processors.format_exc_info, structlog.processors.JSONRenderer()])
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=True,
    )


logger = structlog.get_logger()

__all__ = ["configure_logging", "logger"]
