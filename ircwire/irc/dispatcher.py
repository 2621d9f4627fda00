"""Line splitting, parsing and handler dispatch."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable

from ..config import WireConfig
from ..constants import RPL_WELCOME
from ..logs.logger import logger
from .ctcp import decorate_ctcp
from .identity import SelfIdentity
from .models import Line
from .parser import parse_line

LineHandler = Callable[[Line], Awaitable[None] | None]

ALL_COMMANDS = "*"


class LineDispatcher:
    """Turns received text into :class:`Line` values and hands them to handlers.

    Keeps the shared :class:`SelfIdentity` current: the nick in ``001`` and
    our own ``NICK`` changes are written back to it, so every line already
    handed out compares against the latest nick.
    """

    def __init__(self, identity: SelfIdentity, config: WireConfig | None = None):
        self.identity = identity
        self.config = config or WireConfig()
        self._handlers: dict[str, list[LineHandler]] = {}

    def register(self, command: str, handler: LineHandler) -> None:
        key = command.upper()
        self._handlers.setdefault(key, []).append(handler)
        logger.log_event(
            "irc", "handler_registered", level=logging.DEBUG, command=key
        )

    def unregister(self, command: str, handler: LineHandler) -> None:
        handlers = self._handlers.get(command.upper(), [])
        if handler in handlers:
            handlers.remove(handler)

    async def process_incoming_data(self, buffer: str, new_data: str) -> str:
        """Handle every complete line in ``buffer + new_data``.

        Returns the unterminated remainder to pass back in with the next read.
        """
        buffer += new_data
        while "\n" in buffer:
            line, buffer = buffer.split("\n", 1)
            line = line.removesuffix("\r")
            if line.strip():
                await self.handle_line(line)
        if len(buffer) > self.config.max_buffer_chars:
            logger.log_event(
                "irc",
                "buffer_overflow",
                level=logging.WARNING,
                nick=self.identity.nick,
                size=len(buffer),
            )
            return ""
        return buffer

    async def handle_line(self, raw: str) -> Line:
        if self.config.log_raw_lines:
            logger.log_event(
                "irc", "raw", level=logging.DEBUG, nick=self.identity.nick, raw=raw
            )

        line = parse_line(raw, me=self.identity)
        if not line.command:
            logger.log_event(
                "irc",
                "unparsed_line",
                level=logging.DEBUG,
                nick=self.identity.nick,
                raw=raw,
            )
            return line
        if self.config.decorate_ctcp:
            line = decorate_ctcp(line)

        self._track_identity(line)
        await self._dispatch(line)
        return line

    def _track_identity(self, line: Line) -> None:
        command = line.command.upper()
        if command == RPL_WELCOME and line.args:
            self._rename(line.args[0])
        elif command == "NICK" and line.args and line.source_is_me():
            self._rename(line.args[-1])

    def _rename(self, nick: str) -> None:
        old_nick = self.identity.nick
        if nick == old_nick:
            return
        self.identity.rename(nick)
        logger.log_event("irc", "nick_tracked", nick=nick, old_nick=old_nick or "-")

    async def _dispatch(self, line: Line) -> None:
        handlers = self._handlers.get(line.command.upper(), []) + self._handlers.get(
            ALL_COMMANDS, []
        )
        for handler in handlers:
            try:
                result = handler(line)
                if inspect.isawaitable(result):
                    await result
            except Exception as e:  # noqa: BLE001
                logger.log_event(
                    "irc",
                    "handler_error",
                    level=logging.ERROR,
                    nick=self.identity.nick,
                    command=line.command,
                    error=str(e),
                    error_type=type(e).__name__,
                )
