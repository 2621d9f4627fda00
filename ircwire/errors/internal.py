"""Centralized internal error hierarchy.

Parsing itself never raises: malformed input degrades to empty fields. These
exceptions cover the layers around it.

Classes:
  InternalError        – Base for all internal errors.
  ConfigError          – Invalid configuration values.
"""

from __future__ import annotations

from collections.abc import Mapping


class InternalError(Exception):
    """Base class for all internal errors with metadata support.

    Attributes:
        data: Dictionary containing arbitrary structured context data.
    """

    data: dict[str, object]

    def __init__(
        self, message: str, *, data: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        # Copy into a plain dict to avoid unexpected mutations from caller.
        self.data = dict(data) if data else {}


class ConfigError(InternalError):
    """Raised when configuration values fail validation."""


__all__ = [
    "InternalError",
    "ConfigError",
]
