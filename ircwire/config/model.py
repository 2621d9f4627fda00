from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..constants import DECORATE_CTCP, IRC_MAX_LINE_LENGTH, LOG_RAW_LINES, MAX_BUFFER_CHARS
from ..errors.internal import ConfigError

ENV_PREFIX = "IRCWIRE_"


class WireConfig(BaseModel):
    """Settings for the line dispatcher.

    Attributes:
        decorate_ctcp: Turn CTCP PRIVMSG/NOTICE lines into ACTION, CTCP and
            CTCPREPLY lines before dispatch.
        log_raw_lines: Log every received line at DEBUG level.
        max_buffer_chars: Largest amount of unterminated text kept between
            reads; anything longer is dropped.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    decorate_ctcp: bool = DECORATE_CTCP
    log_raw_lines: bool = LOG_RAW_LINES
    max_buffer_chars: int = Field(default=MAX_BUFFER_CHARS, ge=IRC_MAX_LINE_LENGTH)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> WireConfig:
        """Create a WireConfig from a mapping.

        Raises:
            ConfigError: If any value fails validation.
        """
        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            fields = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
            raise ConfigError(
                f"Invalid configuration: {', '.join(fields)}", data={"fields": fields}
            ) from e

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> WireConfig:
        """Create a WireConfig from ``IRCWIRE_*`` environment variables.

        Unset or empty variables keep their defaults.
        """
        environ = os.environ if environ is None else environ
        data: dict[str, Any] = {}
        for name in cls.model_fields:
            value = environ.get(f"{ENV_PREFIX}{name.upper()}")
            if value is not None and value.strip():
                data[name] = value.strip()
        return cls.from_dict(data)
