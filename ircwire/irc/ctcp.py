"""CTCP decoration for PRIVMSG/NOTICE lines.

A PRIVMSG whose text is wrapped in ``\\x01`` becomes an ``ACTION`` (for
``/me``) or a ``CTCP`` query; the same shape in a NOTICE becomes a
``CTCPREPLY``. The original target moves to ``Line.destination``.
"""

from __future__ import annotations

from dataclasses import replace

from .models import Line

CTCP_DELIM = "\x01"

ACTION = "ACTION"
CTCP = "CTCP"
CTCP_REPLY = "CTCPREPLY"


def decorate_ctcp(line: Line) -> Line:
    """Return the derived CTCP line, or ``line`` itself when it is not one."""
    command = line.command.upper()
    if command not in ("PRIVMSG", "NOTICE") or len(line.args) < 2:
        return line
    target, message = line.args[0], line.args[-1]
    if not message.startswith(CTCP_DELIM):
        return line

    body = message[1:]
    if body.endswith(CTCP_DELIM):
        body = body[:-1]
    tag, _, text = body.partition(" ")
    if not tag:
        return line

    if line.is_privmsg() and tag == ACTION:
        return replace(line, command=ACTION, args=(text,), destination=target)

    args = (tag, text) if text else (tag,)
    derived = CTCP if line.is_privmsg() else CTCP_REPLY
    return replace(line, command=derived, args=args, destination=target)
