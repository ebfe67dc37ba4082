"""Piece-placement notation (the board field of FEN)."""

from __future__ import annotations

from chessgrid.core.board import Board
from chessgrid.core.piece import Piece
from chessgrid.core.types import BOARD_SIZE

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def board_from_placement(text: str, turn: int = 0) -> Board:
    """Build a board from a FEN placement field.

    The first row describes rank index 0 (Black's back rank). Only the
    placement field is read; anything after the first space is ignored.
    """
    placement = text.strip().split(" ", 1)[0]
    rows = placement.split("/")
    if len(rows) != BOARD_SIZE:
        raise ValueError(f"Invalid placement (must contain 8 ranks): {text!r}")
    if turn < 0:
        raise ValueError(f"Turn must be >= 0, got {turn}")

    board = Board()
    for rank, row in enumerate(rows):
        file = 0
        for ch in row:
            if ch.isdigit():
                skip = int(ch)
                if skip < 1 or skip > BOARD_SIZE:
                    raise ValueError(f"Invalid placement digit {ch!r}: {text!r}")
                file += skip
                if file > BOARD_SIZE:
                    raise ValueError(f"Invalid placement rank width: {text!r}")
                continue
            if file >= BOARD_SIZE:
                raise ValueError(f"Invalid placement rank width: {text!r}")
            board.squares[rank][file] = Piece.from_char(ch, rank, file)
            file += 1
        if file != BOARD_SIZE:
            raise ValueError(f"Invalid placement rank width: {text!r}")

    board.turn = turn
    return board


def board_to_placement(board: Board) -> str:
    """Serialise *board* to a FEN placement field."""
    rows: list[str] = []
    for row in board.squares:
        out: list[str] = []
        gap = 0
        for piece in row:
            if piece.is_empty:
                gap += 1
                continue
            if gap:
                out.append(str(gap))
                gap = 0
            out.append(piece.char)
        if gap:
            out.append(str(gap))
        rows.append("".join(out))
    return "/".join(rows)
