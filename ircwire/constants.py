"""
Configuration constants for ircwire

Each constant can be overridden by setting an environment variable with the same name.
"""

import os


def _get_env_int(name: str, default: int) -> int:
    """Retrieve an integer value from an environment variable.

    If the variable is not set or cannot be parsed, prints a warning and
    returns the default value.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            print(
                f"Warning: Invalid integer value for {name}='{value}', using default {default}"
            )
    return default


def _get_env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("true", "1", "yes", "on")


# RFC 1459 line limit, including the CRLF terminator
IRC_MAX_LINE_LENGTH = 512

# Buffered text without a line terminator is dropped past this size
MAX_BUFFER_CHARS = _get_env_int("IRCWIRE_MAX_BUFFER_CHARS", 8192)

DECORATE_CTCP = _get_env_bool("IRCWIRE_DECORATE_CTCP", True)
LOG_RAW_LINES = _get_env_bool("IRCWIRE_LOG_RAW_LINES", False)

# Server numerics the dispatcher reacts to
RPL_WELCOME = "001"
