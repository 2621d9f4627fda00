"""Error types and error logging helpers."""

from .handling import log_error  # noqa: F401
from .internal import ConfigError, InternalError  # noqa: F401

__all__ = ["ConfigError", "InternalError", "log_error"]
