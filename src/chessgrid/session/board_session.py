"""BoardSession — the process-wide board behind one lock.

The three exposed operations (snapshot, legal moves, apply move) each hold
the lock for their full duration. Callers that need a ``get_moves`` /
``make_move`` pair to be atomic wrap both in :meth:`BoardSession.locked`.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from chessgrid.core.board import Board
from chessgrid.core.enums import MoveStatus
from chessgrid.core.movement import get_legal_moves
from chessgrid.core.piece import Piece
from chessgrid.core.rules import try_move
from chessgrid.core.types import Coord

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveReply:
    """Board snapshot after a move attempt, with the attempt's verdict."""

    board: Board
    status: MoveStatus
    captured: Piece | None = None

    @property
    def accepted(self) -> bool:
        return self.status == MoveStatus.OK


class BoardSession:
    """Shared mutable board with single-writer-at-a-time discipline."""

    __slots__ = ("_board", "_lock")

    def __init__(self, board: Board | None = None) -> None:
        self._board = board if board is not None else Board.initial()
        # Re-entrant so that locked() can span the public operations.
        self._lock = threading.RLock()

    @contextmanager
    def locked(self) -> Iterator[BoardSession]:
        """Hold the session lock across several operations."""
        with self._lock:
            yield self

    def get_board(self) -> Board:
        """Snapshot of the current board (safe to keep and mutate)."""
        with self._lock:
            return self._board.copy()

    def get_moves(self, rank: int, file: int) -> list[Coord]:
        with self._lock:
            return get_legal_moves(self._board, rank, file)

    def make_move(
        self,
        moves: Iterable[Coord] | None,
        from_coord: Coord,
        to_coord: Coord,
    ) -> MoveReply:
        """Apply a move and return the resulting snapshot.

        A rejected move leaves the board untouched; the reply says why.
        """
        with self._lock:
            outcome = try_move(self._board, moves, *from_coord, *to_coord)
            if not outcome.accepted:
                _LOGGER.info(
                    "Rejected move %s -> %s: %s",
                    from_coord,
                    to_coord,
                    outcome.status.name,
                )
            return MoveReply(self._board.copy(), outcome.status, outcome.captured)

    def reset(self, board: Board | None = None) -> Board:
        """Replace the shared board (starting position by default)."""
        with self._lock:
            self._board = board.copy() if board is not None else Board.initial()
            return self._board.copy()
