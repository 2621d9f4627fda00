import logging

import pytest

from ircwire.irc.identity import SelfIdentity


@pytest.fixture(autouse=True)
def _plain_log_output(monkeypatch):
    """Keep log output in concise mode and let caplog see ircwire events."""
    monkeypatch.delenv("DEBUG", raising=False)
    logging.getLogger("ircwire").setLevel(logging.DEBUG)
    yield


@pytest.fixture
def identity() -> SelfIdentity:
    """Self identity for a client that registered as ``mybot``."""
    return SelfIdentity("mybot")
