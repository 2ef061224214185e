from __future__ import annotations

import pytest

import ballotbox.__main__ as cli


def test_cli_passes_options_to_uvicorn(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: dict = {}

    def fake_run(app, **kwargs) -> None:  # noqa: ANN001
        seen["app"] = app
        seen.update(kwargs)

    monkeypatch.setattr(cli.uvicorn, "run", fake_run)
    monkeypatch.delenv("BALLOTBOX_PORT", raising=False)
    monkeypatch.delenv("BALLOTBOX_LOG_LEVEL", raising=False)

    cli.main(["--host", "0.0.0.0", "--port", "8123", "--log-level", "debug", "--access-log"])

    assert seen["host"] == "0.0.0.0"
    assert seen["port"] == 8123
    assert seen["log_level"] == "debug"
    assert seen["access_log"] is True
    assert seen["app"].state.store.list_proposals() == []


def test_cli_rejects_unknown_log_level() -> None:
    with pytest.raises(SystemExit):
        cli.main(["--log-level", "loud"])


@pytest.mark.parametrize("key,value", [("BALLOTBOX_LOG_LEVEL", "trace"), ("BALLOTBOX_PORT", "eighty")])
def test_cli_rejects_bad_environment(monkeypatch: pytest.MonkeyPatch, key: str, value: str) -> None:
    monkeypatch.setattr(cli.uvicorn, "run", lambda app, **kwargs: pytest.fail("server should not start"))
    monkeypatch.setenv(key, value)

    with pytest.raises(SystemExit, match=key):
        cli.main([])
