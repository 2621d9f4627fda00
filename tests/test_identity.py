from __future__ import annotations

import threading

from ircwire.irc.identity import SelfIdentity
from ircwire.irc.models import User


def test_default_identity_is_empty():
    me = SelfIdentity()
    assert me.user == User()
    assert me.nick == ""


def test_string_shorthand():
    me = SelfIdentity("mybot")
    assert me.nick == "mybot"
    assert me.user.raw == "mybot"


def test_rename_keeps_user_and_host():
    me = SelfIdentity(User(nick="old", user="bot", host="example.org", raw="old!bot@example.org"))
    me.rename("new")
    assert me.user == User(nick="new", user="bot", host="example.org", raw="new!bot@example.org")


def test_rename_without_host():
    me = SelfIdentity("old")
    me.rename("new")
    assert me.user == User(nick="new", raw="new")


def test_update_replaces_whole_user():
    me = SelfIdentity("old")
    me.update(User(nick="x", user="u", host="h", raw="x!u@h"))
    assert me.nick == "x"
    assert me.user.ident() == "u@h"


def test_snapshot_is_unaffected_by_later_updates():
    me = SelfIdentity("first")
    snapshot = me.user
    me.rename("second")
    assert snapshot.nick == "first"
    assert me.nick == "second"


def test_concurrent_readers_see_whole_values():
    me = SelfIdentity(User(nick="n0", user="u0", host="h0", raw="n0!u0@h0"))
    stop = threading.Event()
    torn: list[User] = []

    def writer() -> None:
        i = 0
        while not stop.is_set():
            i += 1
            me.update(User(nick=f"n{i}", user=f"u{i}", host=f"h{i}", raw=f"n{i}!u{i}@h{i}"))

    def reader() -> None:
        for _ in range(2000):
            snap = me.user
            if snap.raw != f"{snap.nick}!{snap.user}@{snap.host}":
                torn.append(snap)

    w = threading.Thread(target=writer)
    readers = [threading.Thread(target=reader) for _ in range(4)]
    w.start()
    for r in readers:
        r.start()
    for r in readers:
        r.join()
    stop.set()
    w.join()
    assert torn == []


def test_repr_names_nick():
    assert "mybot" in repr(SelfIdentity("mybot"))
