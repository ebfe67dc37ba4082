"""BoardScene — QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

import logging
from typing import Any

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from chessgrid.core.board import Board
from chessgrid.core.enums import Color
from chessgrid.core.types import BOARD_SIZE, Coord
from chessgrid.session.commands import CommandDispatcher, CommandError
from chessgrid.ui.styles.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)


class BoardScene(QGraphicsScene):
    """Renders a board snapshot and turns clicks into engine commands.

    Signals:
        board_changed(dict): Emitted with the new snapshot after every refresh
            or move attempt.
        move_rejected(str): Emitted with a reason when a move is refused.
    """

    board_changed = pyqtSignal(object)
    move_rejected = pyqtSignal(str)

    TILE = 80  # px per square

    def __init__(
        self,
        dispatcher: CommandDispatcher,
        parent: QObject | None = None,
        *,
        theme: BoardTheme | None = None,
    ) -> None:
        super().__init__(parent)
        self._dispatcher = dispatcher
        self._theme = theme if theme is not None else BoardTheme.default()
        self._board = Board()

        # Interaction state
        self._selected: Coord | None = None
        self._legal_moves: list[Coord] = []
        self._last_to: Coord | None = None
        self._show_coordinates = True
        self._show_legal_moves = True

        # Visual layers
        self._square_items: dict[Coord, QGraphicsRectItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._legal_dot_items: list[QGraphicsRectItem] = []
        self._last_move_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[Coord, QGraphicsSimpleTextItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def selected_square(self) -> Coord | None:
        return self._selected

    @property
    def legal_moves(self) -> list[Coord]:
        return list(self._legal_moves)

    def refresh(self) -> None:
        """Fetch the current board from the session and redraw."""
        self.set_snapshot(self._dispatcher.invoke("get_board"))

    def new_game(self) -> None:
        self._last_to = None
        self._clear_items(self._last_move_items)
        self.set_snapshot(self._dispatcher.invoke("reset"))

    def set_snapshot(self, snapshot: dict[str, Any]) -> None:
        """Update the displayed board (full redraw of pieces)."""
        self._board = Board.from_dict(snapshot)
        self._clear_selection()
        self._sync_pieces()
        self.board_changed.emit(snapshot)

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self._sync_pieces()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-destination highlights."""
        self._show_legal_moves = visible
        if not visible:
            self._clear_items(self._legal_dot_items)

    def click_square(self, rank: int, file: int) -> None:
        """Handle a click on (rank, file).

        The first click on a piece of the side to move selects it and asks
        the engine for its destinations. A click on one of those destinations
        applies the move; any other click clears or moves the selection.
        """
        target = (rank, file)
        if self._selected is not None and target in self._legal_moves:
            self._submit_move(self._selected, target)
            return

        piece = self._board.squares[rank][file]
        if not piece.is_empty and piece.color == self._board.side_to_move:
            self._select_square(target)
        else:
            self._clear_selection()

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        font = QFont("Adwaita Sans", max(9, t // 8))

        for r in range(BOARD_SIZE):
            for f in range(BOARD_SIZE):
                is_light = (r + f) % 2 == 0
                color = self._theme.light_square if is_light else self._theme.dark_square
                rect = QGraphicsRectItem(f * t, r * t, t, t)
                rect.setBrush(QBrush(color))
                rect.setPen(QPen(Qt.PenStyle.NoPen))
                rect.setZValue(0)
                self.addItem(rect)
                self._square_items[(r, f)] = rect

                text_color = self._theme.coord_light if is_light else self._theme.coord_dark
                if f == 0:
                    self._add_coord_label(str(BOARD_SIZE - r), font, text_color, 2, r * t + 1)
                if r == BOARD_SIZE - 1:
                    self._add_coord_label(
                        chr(ord("a") + f), font, text_color, f * t + t - 12, r * t + t - 16
                    )

        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)

    def _add_coord_label(
        self, label: str, font: QFont, color: QColor, x: float, y: float
    ) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        t = self.TILE
        font = QFont("DejaVu Sans", int(t * 0.6))
        for row in self._board.squares:
            for piece in row:
                if piece.is_empty:
                    continue
                item = QGraphicsSimpleTextItem(piece.symbol)
                item.setFont(font)
                color = (
                    self._theme.white_piece
                    if piece.color == Color.WHITE
                    else self._theme.black_piece
                )
                item.setBrush(QBrush(color))
                rect = item.boundingRect()
                item.setPos(
                    piece.file * t + (t - rect.width()) / 2,
                    piece.rank * t + (t - rect.height()) / 2,
                )
                item.setZValue(1)
                self.addItem(item)
                self._piece_items[(piece.rank, piece.file)] = item

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None:
            return super().mousePressEvent(event)

        coord = self._pos_to_square(event.scenePos())
        if coord is None:
            self._clear_selection()
        else:
            self.click_square(*coord)
        super().mousePressEvent(event)

    # ── Selection / moves ────────────────────────────────────────────────

    def _select_square(self, coord: Coord) -> None:
        self._clear_selection()
        try:
            moves = self._dispatcher.invoke(
                "get_moves", {"from": {"r": coord[0], "f": coord[1]}}
            )
        except CommandError as exc:
            _LOGGER.warning("get_moves failed for %s: %s", coord, exc)
            self.move_rejected.emit(str(exc))
            return

        self._selected = coord
        self._legal_moves = [(r, f) for r, f in moves]
        self._highlight_items.append(self._make_highlight(coord, self._theme.highlight_from))
        if self._show_legal_moves:
            for dest in self._legal_moves:
                self._legal_dot_items.append(
                    self._make_highlight(dest, self._theme.highlight_to)
                )

    def _submit_move(self, from_coord: Coord, to_coord: Coord) -> None:
        payload = {
            "moves": [list(m) for m in self._legal_moves],
            "from": {"r": from_coord[0], "f": from_coord[1]},
            "to": {"r": to_coord[0], "f": to_coord[1]},
        }
        try:
            reply = self._dispatcher.invoke("make_move", payload)
        except CommandError as exc:
            _LOGGER.warning("make_move failed: %s", exc)
            self._clear_selection()
            self.move_rejected.emit(str(exc))
            return

        if reply["accepted"]:
            self._last_to = to_coord
        self.set_snapshot(reply["board"])
        self._highlight_last_move()
        if not reply["accepted"]:
            self.move_rejected.emit(reply["status"])

    def _highlight_last_move(self) -> None:
        self._clear_items(self._last_move_items)
        if self._last_to is None:
            return
        rect = self._make_highlight(self._last_to, self._theme.last_move_to)
        rect.setZValue(0.5)
        self._last_move_items.append(rect)

    def _clear_selection(self) -> None:
        self._selected = None
        self._legal_moves = []
        self._clear_items(self._highlight_items)
        self._clear_items(self._legal_dot_items)

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _pos_to_square(self, pos: QPointF) -> Coord | None:
        """Scene position → (rank, file)."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE):
            return None
        return row, col

    def _make_highlight(self, coord: Coord, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        r, f = coord
        rect = QGraphicsRectItem(f * t, r * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect
