"""Named command entry points over a :class:`BoardSession`.

The desktop shell talks to the engine only through these commands, using
plain JSON-compatible payloads::

    dispatcher.invoke("get_moves", {"from": {"r": 6, "f": 4}})
    # -> [[5, 4], [4, 4]]
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from chessgrid.core.types import Coord, InvalidSquareError, check_coord
from chessgrid.session.board_session import BoardSession

_LOGGER = logging.getLogger(__name__)

Payload = Mapping[str, Any]
CommandHandler = Callable[[Payload], Any]


class CommandError(ValueError):
    """Unknown command or malformed payload."""


def _coord(payload: Payload, key: str) -> Coord:
    raw = payload.get(key)
    if not isinstance(raw, Mapping) or "r" not in raw or "f" not in raw:
        raise CommandError(f"{key!r} must be an object with 'r' and 'f' fields")
    try:
        return check_coord(raw["r"], raw["f"])
    except InvalidSquareError as exc:
        raise CommandError(str(exc)) from exc


def _coord_list(payload: Payload, key: str) -> list[Coord] | None:
    raw = payload.get(key)
    if raw is None:
        return None
    if not isinstance(raw, (list, tuple)):
        raise CommandError(f"{key!r} must be a list of [rank, file] pairs")
    coords: list[Coord] = []
    for item in raw:
        if not isinstance(item, (list, tuple)) or len(item) != 2:
            raise CommandError(f"Invalid coordinate in {key!r}: {item!r}")
        try:
            coords.append(check_coord(item[0], item[1]))
        except InvalidSquareError as exc:
            raise CommandError(str(exc)) from exc
    return coords


class CommandDispatcher:
    """Maps command names to session operations."""

    __slots__ = ("_session", "_handlers")

    def __init__(self, session: BoardSession | None = None) -> None:
        self._session = session if session is not None else BoardSession()
        self._handlers: dict[str, CommandHandler] = {
            "get_board": self._get_board,
            "get_moves": self._get_moves,
            "make_move": self._make_move,
            "reset": self._reset,
        }

    @property
    def session(self) -> BoardSession:
        return self._session

    @property
    def commands(self) -> tuple[str, ...]:
        return tuple(self._handlers)

    def invoke(self, command: str, payload: Payload | None = None) -> Any:
        """Run *command* with *payload* and return its JSON-ready reply."""
        handler = self._handlers.get(command)
        if handler is None:
            raise CommandError(f"Unknown command: {command!r}")
        if payload is None:
            payload = {}
        elif not isinstance(payload, Mapping):
            raise CommandError(f"Payload for {command!r} must be an object")
        _LOGGER.debug("invoke %s %s", command, dict(payload))
        return handler(payload)

    # ── Handlers ─────────────────────────────────────────────────────────

    def _get_board(self, _payload: Payload) -> dict[str, Any]:
        return self._session.get_board().to_dict()

    def _get_moves(self, payload: Payload) -> list[list[int]]:
        rank, file = _coord(payload, "from")
        return [[r, f] for r, f in self._session.get_moves(rank, file)]

    def _make_move(self, payload: Payload) -> dict[str, Any]:
        moves = _coord_list(payload, "moves")
        reply = self._session.make_move(
            moves, _coord(payload, "from"), _coord(payload, "to")
        )
        return {
            "board": reply.board.to_dict(),
            "accepted": reply.accepted,
            "status": reply.status.name,
        }

    def _reset(self, _payload: Payload) -> dict[str, Any]:
        return self._session.reset().to_dict()
