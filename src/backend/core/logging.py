"""
Structured logging configuration with structlog.

Production emits JSON lines for log aggregation; development renders
colored console output. Call configure_logging() once at startup, then use
structlog.get_logger(__name__) as usual.
"""

import logging

import structlog
from structlog.typing import Processor

from core.config import settings


def _resolve_level(level_name: str) -> int:
    return getattr(logging, level_name.upper(), logging.INFO)


def configure_logging(json_logs: bool | None = None, level: str | None = None) -> None:
    """
    Configure structlog processors.

    Args:
        json_logs: Force JSON (True) or console (False) rendering.
            Defaults to the LOG_JSON / APP_ENV settings.
        level: Minimum log level name. Defaults to LOG_LEVEL.
    """
    if json_logs is None:
        json_logs = settings.use_json_logs
    min_level = _resolve_level(level or settings.LOG_LEVEL)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_logs:
        final_processor: Processor = structlog.processors.JSONRenderer()
        shared_processors.append(structlog.processors.format_exc_info)
    else:
        final_processor = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=shared_processors + [final_processor],
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
