from __future__ import annotations

import logging

from ..logging_config import log_structured_error
from .internal import ConfigError, InternalError


def log_error(message: str, error: Exception, context: dict | None = None) -> None:
    """Logs an error message with the associated exception details.

    Args:
        message: A descriptive message about the error context.
        error: The exception instance to be logged.
        context: Optional additional context data for debugging.
    """
    # Determine error type from exception
    error_type = "unknown"
    if isinstance(error, ConfigError):
        error_type = "config"
    elif isinstance(error, InternalError):
        error_type = "internal"
    elif isinstance(error, OSError):
        error_type = "io"

    if isinstance(error, InternalError) and error.data:
        context = {**error.data, **(context or {})}

    log_structured_error(
        error_type=error_type,
        message=f"{message}: {str(error)}",
        exception=error,
        context=context,
        level=logging.ERROR,
    )
