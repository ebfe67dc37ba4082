"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from chessgrid.core import Board, get_legal_moves, make_move

    board = Board.initial()
    moves = get_legal_moves(board, 6, 4)
    make_move(board, moves, 6, 4, 4, 4)
"""

from chessgrid.core.board import Board
from chessgrid.core.enums import Color, MoveStatus, PieceKind
from chessgrid.core.movement import (
    ControlMap,
    get_legal_moves,
    strategy_for,
)
from chessgrid.core.notation import (
    STARTING_PLACEMENT,
    board_from_placement,
    board_to_placement,
)
from chessgrid.core.piece import ControlCounters, Piece
from chessgrid.core.rules import MoveOutcome, make_move, try_move
from chessgrid.core.types import (
    Coord,
    InvalidSquareError,
    check_coord,
    in_bounds,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "MoveStatus",
    "PieceKind",
    # Types / helpers
    "Coord",
    "InvalidSquareError",
    "check_coord",
    "in_bounds",
    "square_name",
    # Domain objects
    "Board",
    "ControlCounters",
    "ControlMap",
    "MoveOutcome",
    "Piece",
    # Engine
    "get_legal_moves",
    "make_move",
    "strategy_for",
    "try_move",
    # Notation
    "STARTING_PLACEMENT",
    "board_from_placement",
    "board_to_placement",
]
