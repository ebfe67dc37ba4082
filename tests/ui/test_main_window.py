"""Tests for MainWindow wiring."""

from __future__ import annotations

from chessgrid.session.board_session import BoardSession
from chessgrid.session.commands import CommandDispatcher
from chessgrid.ui.main_window import MainWindow, turn_text
from chessgrid.ui.settings import AppSettings


def test_turn_text() -> None:
    assert turn_text(0) == "White To Play"
    assert turn_text(1) == "Black To Play"
    assert turn_text(12) == "White To Play"


def test_window_shows_initial_turn() -> None:
    window = MainWindow(CommandDispatcher())
    assert window.turn_label.text() == "White To Play"
    assert window.board_scene.board.turn == 0


def test_turn_label_follows_moves() -> None:
    window = MainWindow(CommandDispatcher())
    scene = window.board_scene
    scene.click_square(6, 4)
    scene.click_square(4, 4)
    assert window.turn_label.text() == "Black To Play"


def test_new_game_action_resets_session() -> None:
    session = BoardSession()
    window = MainWindow(CommandDispatcher(session))
    window.board_scene.click_square(7, 6)
    window.board_scene.click_square(5, 5)
    assert session.get_board().turn == 1

    window._new_game_action.trigger()

    assert session.get_board().turn == 0
    assert window.turn_label.text() == "White To Play"


def test_rejected_move_shown_in_status_bar() -> None:
    window = MainWindow(CommandDispatcher())
    window._on_move_rejected("WRONG_TURN")
    bar = window.statusBar()
    assert bar is not None
    assert "WRONG_TURN" in bar.currentMessage()


def test_settings_applied() -> None:
    settings = AppSettings(board_theme="Slate", show_coordinates=False)
    window = MainWindow(CommandDispatcher(), settings)
    scene = window.board_scene
    assert all(not item.isVisible() for item in scene._coord_items)
