"""
Structured logging for the compiler.

Events are named ``<area>.<event>`` (``panel.viz_missing``, ``story.written``,
``render.failed``) and carry the story and panel as key-value pairs.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import structlog


def setup_logging(
    log_level: Optional[str] = None, log_format: Optional[str] = None
) -> None:
    """Route structlog events to stderr as console or JSON lines.

    Args:
        log_level: Level name such as "DEBUG"; falls back to ``LOG_LEVEL``.
        log_format: "json" or "console"; falls back to ``LOG_FORMAT``.
    """
    from clickstories.infra.config.settings import get_settings

    settings = get_settings()
    level_name = (log_level or settings.log_level or "INFO").upper()
    fmt = (log_format or settings.log_format or "console").lower()
    level = getattr(logging, level_name, logging.INFO)

    # Logs go to stderr so a document piped to stdout stays clean
    logging.basicConfig(
        level=level, stream=sys.stderr, format="%(message)s", force=True
    )

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    renderer = (
        structlog.processors.JSONRenderer(sort_keys=True)
        if fmt == "json"
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:  # type: ignore[name-defined]
    """Logger for a module; pass ``__name__``."""
    if name:
        return structlog.get_logger(name)
    return structlog.get_logger()


def bind_context(**kwargs) -> None:
    """Attach fields (usually ``story=<name>``) to every event until cleared."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Drop fields bound with ``bind_context`` once a story is written."""
    structlog.contextvars.clear_contextvars()
