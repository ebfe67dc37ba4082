"""Board - piece placement on an 8x8 grid plus the turn counter."""

from __future__ import annotations

from typing import Any

from chessgrid.core.enums import Color, PieceKind
from chessgrid.core.piece import Piece
from chessgrid.core.types import BOARD_SIZE, Coord, check_coord

_BACK_RANK: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


class Board:
    """Mutable 8x8 grid indexed ``[rank][file]``.

    Rank 0 is Black's back rank and rank 7 is White's. An even ``turn``
    means White to move, an odd one Black.
    """

    __slots__ = ("squares", "turn")

    def __init__(self) -> None:
        self.squares: list[list[Piece]] = [
            [Piece.empty(r, f) for f in range(BOARD_SIZE)] for r in range(BOARD_SIZE)
        ]
        self.turn: int = 0

    # -- Element access -----------------------------------------------------

    def __getitem__(self, coord: Coord) -> Piece:
        rank, file = check_coord(*coord)
        return self.squares[rank][file]

    def __setitem__(self, coord: Coord, piece: Piece) -> None:
        rank, file = check_coord(*coord)
        if piece.rank != rank or piece.file != file:
            piece = piece.moved_to(rank, file)
        self.squares[rank][file] = piece

    def is_empty(self, rank: int, file: int) -> bool:
        return self[rank, file].is_empty

    def clear_square(self, rank: int, file: int) -> None:
        self[rank, file] = Piece.empty(rank, file)

    # -- Turn ---------------------------------------------------------------

    @property
    def side_to_move(self) -> Color:
        return Color.WHITE if self.turn % 2 == 0 else Color.BLACK

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color, kind: PieceKind | None = None) -> list[Piece]:
        """Pieces of *color*, optionally restricted to *kind*, in grid order."""
        return [
            p
            for row in self.squares
            for p in row
            if p.color == color and (kind is None or p.kind == kind)
        ]

    # -- Copying / factories ------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b.squares = [row.copy() for row in self.squares]
        b.turn = self.turn
        return b

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position, White to move."""
        b = cls()
        for f, kind in enumerate(_BACK_RANK):
            b.squares[0][f] = Piece(kind, Color.BLACK, 0, f)
            b.squares[1][f] = Piece(PieceKind.PAWN, Color.BLACK, 1, f)
            b.squares[6][f] = Piece(PieceKind.PAWN, Color.WHITE, 6, f)
            b.squares[7][f] = Piece(kind, Color.WHITE, 7, f)
        return b

    # -- Serialisation ------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready snapshot: rows of piece records plus ``turn``."""
        return {
            "squares": [[p.to_dict() for p in row] for row in self.squares],
            "turn": self.turn,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Board:
        rows = data.get("squares")
        if not isinstance(rows, list) or len(rows) != BOARD_SIZE:
            raise ValueError("Board snapshot must contain 8 ranks")
        b = cls()
        for r, row in enumerate(rows):
            if not isinstance(row, list) or len(row) != BOARD_SIZE:
                raise ValueError(f"Board snapshot rank {r} must contain 8 squares")
            for f, record in enumerate(row):
                b[r, f] = Piece.from_dict(record)
        b.turn = int(data.get("turn", 0))
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.turn == other.turn and self.squares == other.squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for r, row in enumerate(self.squares):
            rows.append(f"{BOARD_SIZE - r} {' '.join(p.char for p in row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
