"""Application settings."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from chessgrid.ui.styles.theme import THEME_NAMES

_ENV_PREFIX = "CHESSGRID_"
_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _env_bool(env: Mapping[str, str], key: str, default: bool) -> bool:
    raw = env.get(_ENV_PREFIX + key)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean for {_ENV_PREFIX + key}: {raw!r}")


def _env_theme(env: Mapping[str, str], default: str) -> str:
    name = env.get(_ENV_PREFIX + "BOARD_THEME", default)
    if name not in THEME_NAMES:
        raise ValueError(
            f"Unknown theme for {_ENV_PREFIX}BOARD_THEME: {name!r} "
            f"(expected one of {', '.join(THEME_NAMES)})"
        )
    return name


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    board_theme: str = "Classic"
    show_coordinates: bool = True
    show_legal_moves: bool = True

    # Diagnostics
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> AppSettings:
        """Settings overridden by ``CHESSGRID_*`` environment variables."""
        if env is None:
            env = os.environ
        defaults = cls()
        return cls(
            board_theme=_env_theme(env, defaults.board_theme),
            show_coordinates=_env_bool(env, "SHOW_COORDINATES", defaults.show_coordinates),
            show_legal_moves=_env_bool(env, "SHOW_LEGAL_MOVES", defaults.show_legal_moves),
            log_level=env.get(_ENV_PREFIX + "LOG_LEVEL", defaults.log_level).upper(),
        )
