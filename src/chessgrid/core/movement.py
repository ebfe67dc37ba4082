"""Pseudo-legal destination generation, one movement strategy per piece kind."""

from __future__ import annotations

import logging
from collections.abc import Callable

from chessgrid.core.board import Board
from chessgrid.core.enums import Color, PieceKind
from chessgrid.core.piece import ControlCounters, Piece
from chessgrid.core.types import BOARD_SIZE, Coord, check_coord, in_bounds, square_name

_LOGGER = logging.getLogger(__name__)

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -2),
    (-2, -1),
    (-2, 1),
    (-1, 2),
    (1, 2),
    (2, 1),
    (2, -1),
    (1, -2),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((1, 1), (-1, -1), (1, -1), (-1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS

# White advances toward rank 0, Black toward rank 7.
_PAWN_STEP: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
_PAWN_START_RANK: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}

MovementStrategy = Callable[[Board, Piece], list[Coord]]


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Coord, ...], ...], ...]:
    table: list[tuple[tuple[Coord, ...], ...]] = []
    for rank in range(BOARD_SIZE):
        row: list[tuple[Coord, ...]] = []
        for file in range(BOARD_SIZE):
            row.append(
                tuple(
                    (rank + dr, file + df)
                    for dr, df in offsets
                    if in_bounds(rank + dr, file + df)
                )
            )
        table.append(tuple(row))
    return tuple(table)


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)


# -- Transient control map ---------------------------------------------------


class ControlMap:
    """Per-query grid of :class:`ControlCounters`.

    Built fresh for every king query and discarded afterwards; the shared
    board never sees these counts.
    """

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: list[list[ControlCounters]] = [
            [ControlCounters() for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)
        ]

    def mark(self, color: Color, squares: list[Coord] | tuple[Coord, ...]) -> None:
        for rank, file in squares:
            self._cells[rank][file] = self._cells[rank][file].incremented(color)

    def counters(self, rank: int, file: int) -> ControlCounters:
        return self._cells[rank][file]

    def is_controlled_by(self, rank: int, file: int, color: Color) -> bool:
        return self._cells[rank][file].for_color(color) > 0

    @classmethod
    def for_kings(cls, board: Board) -> ControlMap:
        """Control exerted by each side's king(s) on *board*."""
        control = cls()
        for color in (Color.WHITE, Color.BLACK):
            for king in board.pieces(color, PieceKind.KING):
                control.mark(color, _KING_TARGETS[king.rank][king.file])
        return control


# -- Movement strategies ------------------------------------------------------


def _slide(board: Board, piece: Piece, directions: tuple[tuple[int, int], ...]) -> list[Coord]:
    moves: list[Coord] = []
    squares = board.squares
    for dr, df in directions:
        nr, nf = piece.rank + dr, piece.file + df
        while in_bounds(nr, nf):
            target = squares[nr][nf]
            if target.is_empty:
                moves.append((nr, nf))
                nr += dr
                nf += df
                continue
            if target.color != piece.color:
                moves.append((nr, nf))
            break
    return moves


def _queen_moves(board: Board, piece: Piece) -> list[Coord]:
    return _slide(board, piece, QUEEN_DIRS)


def _rook_moves(board: Board, piece: Piece) -> list[Coord]:
    return _slide(board, piece, ROOK_DIRS)


def _bishop_moves(board: Board, piece: Piece) -> list[Coord]:
    return _slide(board, piece, BISHOP_DIRS)


def _knight_moves(board: Board, piece: Piece) -> list[Coord]:
    squares = board.squares
    return [
        (nr, nf)
        for nr, nf in _KNIGHT_TARGETS[piece.rank][piece.file]
        if squares[nr][nf].color != piece.color
    ]


def _king_moves(board: Board, piece: Piece) -> list[Coord]:
    if not piece.color.is_player:
        return []
    control = ControlMap.for_kings(board)
    opponent = piece.color.opposite
    squares = board.squares
    moves: list[Coord] = []
    for nr, nf in _KING_TARGETS[piece.rank][piece.file]:
        if squares[nr][nf].color == piece.color:
            continue
        if control.is_controlled_by(nr, nf, opponent):
            continue
        moves.append((nr, nf))
    return moves


def _pawn_moves(board: Board, piece: Piece) -> list[Coord]:
    step = _PAWN_STEP.get(piece.color)
    if step is None:
        return []
    ahead = piece.rank + step
    if not 0 <= ahead < BOARD_SIZE:
        return []

    squares = board.squares
    moves: list[Coord] = []
    if squares[ahead][piece.file].is_empty:
        moves.append((ahead, piece.file))
        if piece.rank == _PAWN_START_RANK[piece.color]:
            far = ahead + step
            if squares[far][piece.file].is_empty:
                moves.append((far, piece.file))

    opponent = piece.color.opposite
    for df in (-1, 1):
        nf = piece.file + df
        if 0 <= nf < BOARD_SIZE and squares[ahead][nf].color == opponent:
            moves.append((ahead, nf))
    return moves


_STRATEGIES: dict[PieceKind, MovementStrategy] = {
    PieceKind.KING: _king_moves,
    PieceKind.QUEEN: _queen_moves,
    PieceKind.ROOK: _rook_moves,
    PieceKind.BISHOP: _bishop_moves,
    PieceKind.KNIGHT: _knight_moves,
    PieceKind.PAWN: _pawn_moves,
}


def strategy_for(kind: PieceKind) -> MovementStrategy | None:
    """Movement strategy for *kind*, ``None`` for an empty square."""
    return _STRATEGIES.get(kind)


# -- Public API -------------------------------------------------------------


def get_legal_moves(board: Board, rank: int, file: int) -> list[Coord]:
    """Pseudo-legal destinations for the piece on (rank, file).

    An empty square yields an empty list. Moves are never checked for
    leaving the mover's own king attacked.
    """
    piece = board[check_coord(rank, file)]
    strategy = strategy_for(piece.kind)
    if strategy is None:
        return []
    moves = strategy(board, piece)
    _LOGGER.debug(
        "%s on %s: %s",
        piece,
        square_name(rank, file),
        [square_name(r, f) for r, f in moves],
    )
    return moves
