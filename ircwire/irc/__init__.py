"""IRC subsystem package.

Contains the line and sender mask parser, the value types it produces, the
self identity handle, CTCP decoration and the line dispatcher.
"""

from .ctcp import decorate_ctcp  # noqa: F401
from .dispatcher import LineDispatcher  # noqa: F401
from .identity import SelfIdentity  # noqa: F401
from .models import Line, User  # noqa: F401
from .parser import parse_line, parse_user  # noqa: F401

__all__ = [
    "Line",
    "LineDispatcher",
    "SelfIdentity",
    "User",
    "decorate_ctcp",
    "parse_line",
    "parse_user",
]
