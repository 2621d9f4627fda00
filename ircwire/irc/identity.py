"""Shared handle for the client's own identity."""

from __future__ import annotations

import threading
from dataclasses import replace

from .models import User


class SelfIdentity:
    """Holds the client's current :class:`User`.

    Parsed lines keep a reference to this handle rather than a copy, so a
    nick change confirmed by the server is visible to ``Line.source_is_me``
    without reparsing. The held ``User`` is immutable and swapped under a
    lock: a reader racing an update sees either the old or the new value,
    never a mix of both.
    """

    def __init__(self, user: User | str | None = None) -> None:
        if isinstance(user, str):
            user = User(nick=user, raw=user)
        self._user = user or User()
        self._lock = threading.Lock()

    @property
    def user(self) -> User:
        with self._lock:
            return self._user

    @property
    def nick(self) -> str:
        return self.user.nick

    def update(self, user: User) -> None:
        with self._lock:
            self._user = user

    def rename(self, nick: str) -> None:
        """Replace the nickname, keeping user and host."""
        with self._lock:
            current = self._user
            if current.host and current.user:
                raw = f"{nick}!{current.user}@{current.host}"
            elif current.host:
                raw = f"{nick}@{current.host}"
            else:
                raw = nick
            self._user = replace(current, nick=nick, raw=raw)

    def __repr__(self) -> str:
        return f"SelfIdentity(nick={self.nick!r})"
