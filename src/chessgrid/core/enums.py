"""Core enumerations for the board model."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color. ``EMPTY`` marks an unoccupied square, not a player."""

    WHITE = 0
    BLACK = 1
    EMPTY = 2

    @property
    def opposite(self) -> Color:
        if self == Color.EMPTY:
            raise ValueError("EMPTY has no opposite color")
        return Color(1 - self.value)

    @property
    def is_player(self) -> bool:
        return self != Color.EMPTY

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Piece kinds. ``EMPTY`` marks an unoccupied square."""

    KING = 0
    QUEEN = 1
    ROOK = 2
    BISHOP = 3
    KNIGHT = 4
    PAWN = 5
    EMPTY = 6

    @property
    def is_sliding(self) -> bool:
        return self in (PieceKind.QUEEN, PieceKind.ROOK, PieceKind.BISHOP)

    def __str__(self) -> str:
        return self.name.capitalize()


class MoveStatus(IntEnum):
    """Outcome of a move application attempt."""

    OK = 0
    EMPTY_SQUARE = 1
    WRONG_TURN = 2
    ILLEGAL_DESTINATION = 3
