"""Move application with turn-order enforcement."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from chessgrid.core.board import Board
from chessgrid.core.enums import MoveStatus
from chessgrid.core.movement import get_legal_moves
from chessgrid.core.piece import Piece
from chessgrid.core.types import Coord, check_coord, square_name

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """Result of :func:`try_move`."""

    status: MoveStatus
    moved: Piece | None = None
    captured: Piece | None = None

    @property
    def accepted(self) -> bool:
        return self.status == MoveStatus.OK


def _normalise(destinations: Iterable[Coord]) -> set[Coord]:
    return {(int(r), int(f)) for r, f in destinations}


def try_move(
    board: Board,
    legal_destinations: Iterable[Coord] | None,
    from_rank: int,
    from_file: int,
    to_rank: int,
    to_file: int,
) -> MoveOutcome:
    """Apply a move if it passes the turn gate and the destination gate.

    *legal_destinations* is the set the caller computed for the ``from``
    square. It is checked, and the destination must also be in a freshly
    computed legal set, so stale caller data cannot sneak a move through.
    Pass ``None`` to rely on the recomputation alone.
    """
    check_coord(from_rank, from_file)
    check_coord(to_rank, to_file)
    piece = board.squares[from_rank][from_file]
    target = (to_rank, to_file)

    if piece.is_empty:
        _LOGGER.debug("No piece on %s", square_name(from_rank, from_file))
        return MoveOutcome(MoveStatus.EMPTY_SQUARE)

    if piece.color != board.side_to_move:
        _LOGGER.debug(
            "%s on %s moved out of turn (turn %d)",
            piece,
            square_name(from_rank, from_file),
            board.turn,
        )
        return MoveOutcome(MoveStatus.WRONG_TURN)

    legal = get_legal_moves(board, from_rank, from_file)
    if target not in legal or (
        legal_destinations is not None and target not in _normalise(legal_destinations)
    ):
        _LOGGER.debug(
            "Available moves: %s, your move: %s",
            [square_name(r, f) for r, f in legal],
            square_name(to_rank, to_file),
        )
        return MoveOutcome(MoveStatus.ILLEGAL_DESTINATION)

    captured = board.squares[to_rank][to_file]
    moved = piece.moved_to(to_rank, to_file)
    board.squares[to_rank][to_file] = moved
    board.squares[from_rank][from_file] = Piece.empty(from_rank, from_file)
    board.turn += 1

    _LOGGER.debug(
        "Moved %s %s -> %s",
        piece,
        square_name(from_rank, from_file),
        square_name(to_rank, to_file),
    )
    return MoveOutcome(
        MoveStatus.OK,
        moved=moved,
        captured=None if captured.is_empty else captured,
    )


def make_move(
    board: Board,
    legal_destinations: Iterable[Coord] | None,
    from_rank: int,
    from_file: int,
    to_rank: int,
    to_file: int,
) -> bool:
    """Return True if the move was made, else False."""
    return try_move(
        board, legal_destinations, from_rank, from_file, to_rank, to_file
    ).accepted
