"""Utility modules for the demonstration refiner.

Provides:
- Structured logging configuration
"""

from .logging import LogContext, configure_from_settings, configure_logging, get_logger, log_operation

__all__ = [
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "LogContext",
    "log_operation",
]
