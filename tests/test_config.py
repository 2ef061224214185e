from __future__ import annotations

import pytest

from ballotbox.config import DEFAULT_CORS_ORIGINS, DEFAULT_IDENTITY_HEADER, Settings, normalize_base_url


def test_defaults_without_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in [
        "BALLOTBOX_URL",
        "BALLOTBOX_HOST",
        "BALLOTBOX_PORT",
        "BALLOTBOX_CORS_ORIGINS",
        "BALLOTBOX_IDENTITY_HEADER",
        "BALLOTBOX_LOG_LEVEL",
    ]:
        monkeypatch.delenv(key, raising=False)

    s = Settings.from_env()
    assert s.url == ""
    assert s.host == "127.0.0.1"
    assert s.port == 8000
    assert s.cors_origins == DEFAULT_CORS_ORIGINS
    assert s.identity_header == DEFAULT_IDENTITY_HEADER
    assert s.log_level == "info"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BALLOTBOX_URL", "localhost:9000/")
    monkeypatch.setenv("BALLOTBOX_PORT", "9001")
    monkeypatch.setenv("BALLOTBOX_CORS_ORIGINS", "https://a.example, https://b.example,")
    monkeypatch.setenv("BALLOTBOX_IDENTITY_HEADER", "X-Principal")
    monkeypatch.setenv("BALLOTBOX_LOG_LEVEL", "DEBUG")

    s = Settings.from_env()
    assert s.url == "http://localhost:9000"
    assert s.port == 9001
    assert s.cors_origins == ("https://a.example", "https://b.example")
    assert s.identity_header == "X-Principal"
    assert s.log_level == "debug"


def test_bad_port_is_reported(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BALLOTBOX_PORT", "eighty")
    with pytest.raises(ValueError, match="BALLOTBOX_PORT"):
        Settings.from_env()


def test_normalize_base_url() -> None:
    assert normalize_base_url("") == ""
    assert normalize_base_url("  127.0.0.1:8000 ") == "http://127.0.0.1:8000"
    assert normalize_base_url("https://vote.example/") == "https://vote.example"


def test_bad_log_level_is_reported(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BALLOTBOX_LOG_LEVEL", "trace")
    with pytest.raises(ValueError, match="BALLOTBOX_LOG_LEVEL"):
        Settings.from_env()
