"""Tests for AppSettings, themes and logging bootstrap."""

from __future__ import annotations

import logging

import pytest

from chessgrid.ui.bootstrap import configure_logging
from chessgrid.ui.settings import AppSettings
from chessgrid.ui.styles.theme import BoardTheme


def test_defaults_without_env() -> None:
    assert AppSettings.from_env({}) == AppSettings()


def test_env_overrides() -> None:
    settings = AppSettings.from_env(
        {
            "CHESSGRID_BOARD_THEME": "Slate",
            "CHESSGRID_SHOW_COORDINATES": "off",
            "CHESSGRID_SHOW_LEGAL_MOVES": "0",
            "CHESSGRID_LOG_LEVEL": "debug",
        }
    )
    assert settings == AppSettings(
        board_theme="Slate",
        show_coordinates=False,
        show_legal_moves=False,
        log_level="DEBUG",
    )


def test_invalid_bool_raises() -> None:
    with pytest.raises(ValueError, match="CHESSGRID_SHOW_COORDINATES"):
        AppSettings.from_env({"CHESSGRID_SHOW_COORDINATES": "maybe"})


def test_theme_lookup() -> None:
    assert BoardTheme.by_name("Slate") == BoardTheme.slate()
    assert BoardTheme.by_name("Nope") == BoardTheme.default()


def test_unknown_theme_in_env_raises() -> None:
    with pytest.raises(ValueError, match="CHESSGRID_BOARD_THEME"):
        AppSettings.from_env({"CHESSGRID_BOARD_THEME": "Neon"})


def test_configure_logging_unknown_level(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, object]] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    configure_logging(AppSettings(log_level="LOUD"))
    assert calls[0]["level"] == logging.WARNING

    configure_logging(AppSettings(log_level="DEBUG"))
    assert calls[1]["level"] == logging.DEBUG
