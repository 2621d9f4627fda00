from __future__ import annotations

import json
import logging

from ircwire.logs import event_catalog
from ircwire.logs.logger import SimpleFormatter, WireLogger


def test_logger_template_and_fallback(caplog) -> None:  # type: ignore[no-untyped-def]
    log = WireLogger("test_logger")
    caplog.set_level(logging.INFO)

    log.log_event("app", "start")
    # Unknown template should fallback and mark derived
    log.log_event("custom_domain", "custom_action", extra_field=123)

    msgs = [r.message for r in caplog.records]
    assert any("Starting ircwire line reader" in m for m in msgs)
    assert any("custom domain: custom action" in m for m in msgs)


def test_logger_template_uses_context(caplog) -> None:  # type: ignore[no-untyped-def]
    log = WireLogger("test_logger_ctx")
    caplog.set_level(logging.INFO)
    log.log_event("irc", "nick_tracked", nick="alice", old_nick="bob")
    msg = caplog.records[-1].message
    assert "[alice" in msg
    assert "Own nick is now alice (was bob)" in msg


def test_logger_template_missing_field_falls_back(caplog) -> None:  # type: ignore[no-untyped-def]
    log = WireLogger("test_logger_missing")
    caplog.set_level(logging.INFO)
    log.log_event("irc", "nick_tracked")
    assert "{nick}" in caplog.records[-1].message


def test_logger_debug_alignment(caplog, monkeypatch) -> None:  # type: ignore[no-untyped-def]
    monkeypatch.setenv("DEBUG", "1")
    log = WireLogger("test_logger3")
    caplog.set_level(logging.DEBUG)
    log.log_event("app", "start", version="1.0")
    first = caplog.records[0].message
    assert first.startswith("app_start")
    assert len(first.split("[")[0]) >= 32
    assert "version='1.0'" in first


def test_simple_formatter_without_color() -> None:
    formatter = SimpleFormatter()
    formatter.enable_color = False
    record = logging.LogRecord(
        name="test", level=logging.WARNING, pathname="", lineno=0, msg="careful", args=(), exc_info=None
    )
    assert formatter.format(record) == "WARNING  careful"


def test_catalog_reload_from_custom_file(tmp_path) -> None:  # type: ignore[no-untyped-def]
    path = tmp_path / "templates.json"
    path.write_text(json.dumps({"demo": {"hello": "Hello {who}"}, "bad": "skip"}), encoding="utf-8")
    try:
        event_catalog.reload_event_templates(path)
        assert event_catalog.EVENT_TEMPLATES == {("demo", "hello"): "Hello {who}"}
    finally:
        event_catalog.reload_event_templates()
    assert ("app", "start") in event_catalog.EVENT_TEMPLATES


def test_catalog_missing_file(tmp_path) -> None:  # type: ignore[no-untyped-def]
    try:
        event_catalog.reload_event_templates(tmp_path / "nope.json")
        assert ("app", "load_error") in event_catalog.EVENT_TEMPLATES
    finally:
        event_catalog.reload_event_templates()
