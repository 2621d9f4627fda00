"""ircwire: IRC protocol line parsing.

Typical use::

    from ircwire import SelfIdentity, parse_line

    me = SelfIdentity("mybot")
    line = parse_line(":alice!a@example.org PRIVMSG #chan :hi", me=me)
    line.source.nick, line.command, line.args
"""

from .irc import (  # noqa: F401
    Line,
    LineDispatcher,
    SelfIdentity,
    User,
    decorate_ctcp,
    parse_line,
    parse_user,
)

__version__ = "1.0.0"

__all__ = [
    "Line",
    "LineDispatcher",
    "SelfIdentity",
    "User",
    "decorate_ctcp",
    "parse_line",
    "parse_user",
]
