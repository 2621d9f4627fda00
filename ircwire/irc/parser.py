"""IRC line and sender mask parsing.

Both entry points are total: every input string yields a value, and
unrecognised input only leaves fields empty.
"""

from __future__ import annotations

import re
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from .models import Line, User

if TYPE_CHECKING:  # pragma: no cover
    from .identity import SelfIdentity

# nick: letter or one of [ \ ] ^ _ ` { | }, then letters, digits, those, or '-'
_NICK_FIRST = r"[a-zA-Z\[-`{-}]"
_NICK_REST = r"[a-zA-Z0-9\[-`{-}\-]+"
USER_MASK_RE = re.compile(
    rf"(?P<nick>{_NICK_FIRST}{_NICK_REST})(?:!(?P<user>[^@]+))?@(?P<host>.+)"
)

TRAILING_SEPARATOR = " :"


def parse_user(raw: str) -> User:
    """Parse ``nick[!user]@host`` into a :class:`User`.

    Anything that does not match the whole string (server names, masks
    without ``@``) keeps only ``raw``.
    """
    match = USER_MASK_RE.fullmatch(raw)
    if match is None:
        return User(raw=raw)
    return User(
        nick=match.group("nick"),
        user=match.group("user") or "",
        host=match.group("host"),
        raw=raw,
    )


def parse_line(raw_line: str, me: SelfIdentity | None = None) -> Line:
    """Parse a raw IRC line (without its terminator) into a :class:`Line`.

    Returns a line with an empty command when nothing usable was found.
    """
    timestamp = datetime.now(UTC)
    aborted = Line(raw=raw_line, timestamp=timestamp, me=me)

    # quick sanity check
    if not raw_line or raw_line[0] == " ":
        return aborted

    head, sep, trailing = raw_line.partition(TRAILING_SEPARATOR)
    words = [word for word in head.split(" ") if word]
    if not words:
        return aborted

    source = User()
    if words[0].startswith(":"):
        source = parse_user(words[0][1:])
        words = words[1:]
    if not words:
        # prefix without a command
        return aborted

    command, *args = words
    if sep:
        args.append(trailing)

    return Line(
        source=source,
        command=command,
        args=tuple(args),
        raw=raw_line,
        timestamp=timestamp,
        me=me,
    )
