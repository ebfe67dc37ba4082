"""MainWindow — board view, turn banner and game menu."""

from __future__ import annotations

from typing import Any

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QPainter
from PyQt6.QtWidgets import (
    QGraphicsView,
    QLabel,
    QMainWindow,
    QVBoxLayout,
    QWidget,
)

from chessgrid.session.commands import CommandDispatcher
from chessgrid.ui.board.board_scene import BoardScene
from chessgrid.ui.settings import AppSettings
from chessgrid.ui.styles.theme import BoardTheme


def turn_text(turn: int) -> str:
    return f"{'White' if turn % 2 == 0 else 'Black'} To Play"


class MainWindow(QMainWindow):
    """Top-level window hosting the board."""

    def __init__(
        self,
        dispatcher: CommandDispatcher | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        super().__init__()
        self._dispatcher = dispatcher if dispatcher is not None else CommandDispatcher()
        self._settings = settings if settings is not None else AppSettings()

        self.setWindowTitle("chessgrid")

        self._turn_label = QLabel()
        self._turn_label.setObjectName("turnLabel")
        self._turn_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._board_scene = BoardScene(self._dispatcher, self)
        self._board_scene.board_changed.connect(self._on_board_changed)
        self._board_scene.move_rejected.connect(self._on_move_rejected)

        self._board_view = QGraphicsView(self._board_scene)
        self._board_view.setRenderHint(QPainter.RenderHint.Antialiasing)
        side = BoardScene.TILE * 8 + 4
        self._board_view.setFixedSize(side, side)

        central = QWidget()
        layout = QVBoxLayout(central)
        layout.addWidget(self._turn_label, alignment=Qt.AlignmentFlag.AlignHCenter)
        layout.addWidget(self._board_view, alignment=Qt.AlignmentFlag.AlignHCenter)
        self.setCentralWidget(central)

        self._build_menu()
        self._apply_settings()
        self._board_scene.refresh()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board_scene(self) -> BoardScene:
        return self._board_scene

    @property
    def turn_label(self) -> QLabel:
        return self._turn_label

    # ── Setup ────────────────────────────────────────────────────────────

    def _build_menu(self) -> None:
        menu_bar = self.menuBar()
        if menu_bar is None:
            return
        game_menu = menu_bar.addMenu("&Game")
        if game_menu is None:
            return

        self._new_game_action = QAction("&New Game", self)
        self._new_game_action.setShortcut("Ctrl+N")
        self._new_game_action.triggered.connect(self._on_new_game)
        game_menu.addAction(self._new_game_action)

        quit_action = QAction("&Quit", self)
        quit_action.setShortcut("Ctrl+Q")
        quit_action.triggered.connect(self.close)
        game_menu.addAction(quit_action)

    def _apply_settings(self) -> None:
        s = self._settings
        scene = self._board_scene
        scene.set_theme(BoardTheme.by_name(s.board_theme))
        scene.set_show_coordinates(s.show_coordinates)
        scene.set_show_legal_moves(s.show_legal_moves)

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_new_game(self) -> None:
        self._board_scene.new_game()
        self._show_status("New game")

    def _on_board_changed(self, snapshot: dict[str, Any]) -> None:
        self._turn_label.setText(turn_text(int(snapshot.get("turn", 0))))

    def _on_move_rejected(self, reason: str) -> None:
        self._show_status(f"Move rejected: {reason}")

    def _show_status(self, text: str) -> None:
        bar = self.statusBar()
        if bar is not None:
            bar.showMessage(text, 3000)
