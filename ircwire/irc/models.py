"""IRC value types produced by the parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .identity import SelfIdentity


@dataclass(frozen=True, slots=True)
class User:
    """Sender of a line.

    ``nick``, ``user`` and ``host`` are only filled in when the text had the
    shape ``nick[!user]@host``. A server name leaves all three empty and only
    ``raw`` is set.
    """

    nick: str = ""
    user: str = ""
    host: str = ""
    raw: str = ""

    def display(self) -> str:
        """Return the nickname, or the raw text when there is none."""
        return self.nick or self.raw

    def ident(self) -> str:
        """Return ``user@host``, just ``host`` without a user, else ``""``."""
        if self.host and self.user:
            return f"{self.user}@{self.host}"
        if self.host:
            return self.host
        return ""

    def __str__(self) -> str:
        return self.display()


@dataclass(frozen=True, slots=True)
class Line:
    """One parsed protocol line.

    ``destination`` is only filled in for the derived ACTION, CTCP and
    CTCPREPLY commands; it holds the target the PRIVMSG/NOTICE was sent to.
    """

    source: User = field(default_factory=User)
    command: str = ""
    args: tuple[str, ...] = ()
    raw: str = ""
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    destination: str = ""
    me: SelfIdentity | None = field(default=None, compare=False, repr=False)

    def source_is_me(self) -> bool:
        """Whether the sender is the client itself, as of right now."""
        my_nick = self.me.nick if self.me is not None else ""
        return self.source.nick == my_nick

    def is_privmsg(self) -> bool:  # convenience
        return self.command.upper() == "PRIVMSG"
