"""Piece value object and per-square control counters."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from chessgrid.core.enums import Color, PieceKind

_FEN_CHARS: dict[PieceKind, str] = {
    PieceKind.KING: "k",
    PieceKind.QUEEN: "q",
    PieceKind.ROOK: "r",
    PieceKind.BISHOP: "b",
    PieceKind.KNIGHT: "n",
    PieceKind.PAWN: "p",
}
_CHAR_KINDS: dict[str, PieceKind] = {v: k for k, v in _FEN_CHARS.items()}

_UNICODE: dict[tuple[Color, PieceKind], str] = {
    (Color.WHITE, PieceKind.KING): "♔",
    (Color.WHITE, PieceKind.QUEEN): "♕",
    (Color.WHITE, PieceKind.ROOK): "♖",
    (Color.WHITE, PieceKind.BISHOP): "♗",
    (Color.WHITE, PieceKind.KNIGHT): "♘",
    (Color.WHITE, PieceKind.PAWN): "♙",
    (Color.BLACK, PieceKind.KING): "♚",
    (Color.BLACK, PieceKind.QUEEN): "♛",
    (Color.BLACK, PieceKind.ROOK): "♜",
    (Color.BLACK, PieceKind.BISHOP): "♝",
    (Color.BLACK, PieceKind.KNIGHT): "♞",
    (Color.BLACK, PieceKind.PAWN): "♟",
}

_COLOR_LETTERS: dict[Color, str] = {Color.WHITE: "W", Color.BLACK: "B", Color.EMPTY: "E"}


@dataclass(frozen=True, slots=True)
class ControlCounters:
    """How many pieces of each color control a square."""

    white: int = 0
    black: int = 0

    def for_color(self, color: Color) -> int:
        if color == Color.WHITE:
            return self.white
        if color == Color.BLACK:
            return self.black
        return 0

    def incremented(self, color: Color) -> ControlCounters:
        """Copy with *color*'s counter raised by one (EMPTY is ignored)."""
        if color == Color.WHITE:
            return replace(self, white=self.white + 1)
        if color == Color.BLACK:
            return replace(self, black=self.black + 1)
        return self


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable record of what stands on one square.

    An unoccupied square is a piece of kind ``EMPTY`` and color ``EMPTY``.
    ``rank`` / ``file`` always mirror the square the record is stored on.
    """

    kind: PieceKind
    color: Color
    rank: int
    file: int
    controlled_by: ControlCounters = field(default_factory=ControlCounters)

    @classmethod
    def empty(cls, rank: int, file: int) -> Piece:
        return cls(PieceKind.EMPTY, Color.EMPTY, rank, file)

    @property
    def is_empty(self) -> bool:
        return self.kind == PieceKind.EMPTY or self.color == Color.EMPTY

    def moved_to(self, rank: int, file: int) -> Piece:
        """Same piece relocated to (rank, file)."""
        return replace(self, rank=rank, file=file)

    # ── Display / serialisation ─────────────────────────────────────────

    def __str__(self) -> str:
        return f"{_COLOR_LETTERS[self.color]} {self.kind}"

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, or an empty string for an empty square."""
        return _UNICODE.get((self.color, self.kind), "")

    @property
    def char(self) -> str:
        """FEN letter (uppercase = white, lowercase = black), '.' if empty."""
        if self.is_empty:
            return "."
        letter = _FEN_CHARS[self.kind]
        return letter.upper() if self.color == Color.WHITE else letter

    @classmethod
    def from_char(cls, char: str, rank: int, file: int) -> Piece:
        """Create piece from a FEN letter, e.g. 'N' → white knight."""
        try:
            kind = _CHAR_KINDS[char.lower()]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        color = Color.WHITE if char.isupper() else Color.BLACK
        return cls(kind, color, rank, file)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.kind.name.capitalize(),
            "color": self.color.name.capitalize(),
            "rank": self.rank,
            "file": self.file,
            "controlled_by": {
                "white": self.controlled_by.white,
                "black": self.controlled_by.black,
            },
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Piece:
        try:
            kind = PieceKind[str(data["name"]).upper()]
            color = Color[str(data["color"]).upper()]
            rank = int(data["rank"])
            file = int(data["file"])
            counters = data.get("controlled_by") or {}
            controlled_by = ControlCounters(
                int(counters.get("white", 0)), int(counters.get("black", 0))
            )
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"Invalid piece record: {data!r}") from exc
        return cls(kind, color, rank, file, controlled_by)
