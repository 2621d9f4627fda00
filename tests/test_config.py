import pytest

from ircwire.config import WireConfig
from ircwire.constants import IRC_MAX_LINE_LENGTH
from ircwire.errors import ConfigError


def test_defaults():
    config = WireConfig()
    assert config.decorate_ctcp is True
    assert config.log_raw_lines is False
    assert config.max_buffer_chars >= IRC_MAX_LINE_LENGTH


def test_from_dict_coerces_values():
    config = WireConfig.from_dict(
        {"decorate_ctcp": "false", "log_raw_lines": "yes", "max_buffer_chars": "4096"}
    )
    assert config.decorate_ctcp is False
    assert config.log_raw_lines is True
    assert config.max_buffer_chars == 4096


def test_from_dict_rejects_small_buffer():
    with pytest.raises(ConfigError) as exc:
        WireConfig.from_dict({"max_buffer_chars": 100})
    assert exc.value.data["fields"] == ["max_buffer_chars"]


def test_from_dict_rejects_unknown_keys():
    with pytest.raises(ConfigError):
        WireConfig.from_dict({"colour": "red"})


def test_from_env_reads_prefixed_variables():
    config = WireConfig.from_env(
        {"IRCWIRE_DECORATE_CTCP": "0", "IRCWIRE_MAX_BUFFER_CHARS": " 1024 ", "OTHER": "x"}
    )
    assert config.decorate_ctcp is False
    assert config.max_buffer_chars == 1024


def test_from_env_ignores_empty_values():
    config = WireConfig.from_env({"IRCWIRE_LOG_RAW_LINES": "  "})
    assert config.log_raw_lines == WireConfig().log_raw_lines


def test_from_env_uses_process_environment(monkeypatch):
    monkeypatch.setenv("IRCWIRE_LOG_RAW_LINES", "true")
    assert WireConfig.from_env().log_raw_lines is True


def test_from_env_invalid_value_raises(monkeypatch):
    monkeypatch.setenv("IRCWIRE_MAX_BUFFER_CHARS", "lots")
    with pytest.raises(ConfigError, match="max_buffer_chars"):
        WireConfig.from_env()


def test_config_is_frozen():
    config = WireConfig()
    with pytest.raises(Exception):  # noqa: B017
        config.decorate_ctcp = False  # type: ignore[misc]
