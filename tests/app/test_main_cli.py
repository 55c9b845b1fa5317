from __future__ import annotations

import os
from pathlib import Path

import pytest

from app import main as app_main


def test_main_renders_inline(monkeypatch) -> None:
    called = {}

    def fake_streamlit_app(*, default_timezone=None, default_tick_count=None):
        called["default_timezone"] = default_timezone
        called["default_tick_count"] = default_tick_count

    monkeypatch.setenv("STREAMLIT_SERVER_PORT", "1")
    # Patch the imported symbol used inside app.main (not the package attribute)
    monkeypatch.setattr(app_main, "streamlit_app", fake_streamlit_app, raising=True)

    app_main.main(["--tz", "Europe/Berlin", "--ticks", "4"])

    assert called["default_timezone"] == "Europe/Berlin"
    assert called["default_tick_count"] == 4


def test_main_renders_inline_without_overrides(monkeypatch) -> None:
    called = {}

    def fake_streamlit_app(*, default_timezone=None, default_tick_count=None):
        called["args"] = (default_timezone, default_tick_count)

    monkeypatch.setenv("STREAMLIT_SERVER_PORT", "1")
    monkeypatch.setattr(app_main, "streamlit_app", fake_streamlit_app, raising=True)

    app_main.main([])

    assert called["args"] == (None, None)


def test_main_execs_streamlit(monkeypatch) -> None:
    # Ensure not in Streamlit context
    monkeypatch.delenv("STREAMLIT_SERVER_PORT", raising=False)

    captured = {}

    def fake_execv(exe: str, cmd: list[str]) -> None:
        captured["exe"] = exe
        captured["cmd"] = cmd
        # Prevent process handoff
        raise SystemExit

    monkeypatch.setattr(os, "execv", fake_execv, raising=True)

    with pytest.raises(SystemExit):
        app_main.main(["--tz", "Asia/Tokyo", "--ticks", "3"])

    assert captured["cmd"][0] == captured["exe"]
    # Assert we launch `python -m streamlit run <path>`
    assert captured["cmd"][1:4] == ["-m", "streamlit", "run"]
    expected_main_path = str(Path(app_main.__file__).resolve())
    assert captured["cmd"][4] == expected_main_path
    dashdash_idx = captured["cmd"].index("--")
    passthrough = captured["cmd"][dashdash_idx + 1 :]
    assert passthrough == ["--tz", "Asia/Tokyo", "--ticks", "3", "--log-level", "INFO"]


def test_main_rejects_unknown_log_level() -> None:
    with pytest.raises(SystemExit):
        app_main.main(["--log-level", "LOUD"])
