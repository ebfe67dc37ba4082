"""Coordinate type alias and helpers.

Board layout (rank index, file index), both 0–7:
    (0, 0) = a8 ... (0, 7) = h8     Black's back rank
    (7, 0) = a1 ... (7, 7) = h1     White's back rank
"""

from __future__ import annotations

from typing import TypeAlias

Coord: TypeAlias = tuple[int, int]  # (rank, file)

BOARD_SIZE = 8


class InvalidSquareError(ValueError):
    """Raised for a rank or file outside 0–7."""

    def __init__(self, rank: object, file: object) -> None:
        super().__init__(f"Square out of range: rank={rank!r}, file={file!r}")
        self.rank = rank
        self.file = file


def in_bounds(rank: int, file: int) -> bool:
    """Whether (rank, file) lies on the board."""
    return 0 <= rank < BOARD_SIZE and 0 <= file < BOARD_SIZE


def check_coord(rank: int, file: int) -> Coord:
    """Return (rank, file) or raise :class:`InvalidSquareError`."""
    if (
        isinstance(rank, bool)
        or isinstance(file, bool)
        or not isinstance(rank, int)
        or not isinstance(file, int)
        or not in_bounds(rank, file)
    ):
        raise InvalidSquareError(rank, file)
    return rank, file


def square_name(rank: int, file: int) -> str:
    """Human-readable name, e.g. (6, 4) → 'e2'."""
    check_coord(rank, file)
    return chr(ord("a") + file) + str(BOARD_SIZE - rank)
