"""Structured logging configuration.

This module initializes structlog with a stable JSON event format.
Events go to stderr so CLI results on stdout stay machine-readable.
"""

from __future__ import annotations

import sys
from typing import Any

import structlog


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger with structured output.
    """
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )
    return structlog.get_logger(name)


def _stderr_logger(*_: Any) -> structlog.PrintLogger:
    """Bind output to the current stderr stream at call time."""
    return structlog.PrintLogger(file=sys.stderr)
