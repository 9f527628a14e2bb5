"""Structured logging configuration for the demonstration refiner.

Provides:
- Structured logging with structlog
- Context-aware logging
- Operation start/end logging
"""

import logging
import sys
from contextlib import contextmanager
from typing import Optional

import structlog


def configure_logging(
    level: str = "INFO",
    json_format: bool = False,
    include_timestamp: bool = True,
) -> None:
    """Configure structured logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_format: Output logs as JSON
        include_timestamp: Include timestamps in logs
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper()),
    )

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso") if include_timestamp else structlog.processors.TimeStamper(fmt=None),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_from_settings(settings=None) -> None:
    """Configure logging from application settings."""
    if settings is None:
        from src.config import get_settings

        settings = get_settings()
    configure_logging(level=settings.log_level, json_format=settings.log_json)


def get_logger(**context) -> structlog.BoundLogger:
    """Get a logger with context bound, e.g. ``get_logger(session_id=...)``."""
    return structlog.get_logger().bind(**context)


class LogContext:
    """Context manager for scoped logging context.

    Usage:
        with LogContext(session_id="teach-1"):
            logger.info("Refining")
            # All logs within this block have session_id bound
    """

    def __init__(self, **context):
        self.context = context
        self._token = None

    def __enter__(self) -> "LogContext":
        self._token = structlog.contextvars.bind_contextvars(**self.context)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self._token:
            structlog.contextvars.unbind_contextvars(*self.context.keys())


@contextmanager
def log_operation(
    operation: str,
    logger: Optional[structlog.BoundLogger] = None,
    **context,
):
    """Context manager for logging operation start/end.

    Yields:
        Dict to store operation results

    Example:
        with log_operation("refine_session", session_id="1") as op:
            result = pipeline.run(events)
            op["refined_count"] = result.refined_count
    """
    log = logger or get_logger()
    log = log.bind(operation=operation, **context)

    log.debug(f"{operation} started")
    result = {"success": False, "error": None}

    try:
        yield result
        result["success"] = True
        log.debug(f"{operation} completed", **result)
    except Exception as e:
        result["error"] = str(e)
        log.error(f"{operation} failed", **result)
        raise
