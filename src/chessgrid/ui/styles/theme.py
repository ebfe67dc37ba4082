"""Visual theme constants and QSS styles for chessgrid."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_from: QColor  # selected piece origin
    highlight_to: QColor  # legal destinations
    last_move_to: QColor  # last move destination
    white_piece: QColor
    black_piece: QColor
    coord_light: QColor  # coordinate text on dark squares
    coord_dark: QColor  # coordinate text on light squares

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            highlight_from=QColor(249, 115, 22, 160),  # orange
            highlight_to=QColor(255, 237, 213, 170),  # pale orange
            last_move_to=QColor(253, 186, 116, 140),
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(0, 0, 0),
            coord_light=QColor(181, 136, 99),
            coord_dark=QColor(240, 217, 181),
        )

    @classmethod
    def slate(cls) -> BoardTheme:
        return cls(
            light_square=QColor(71, 85, 105),
            dark_square=QColor(30, 41, 59),
            highlight_from=QColor(249, 115, 22, 160),
            highlight_to=QColor(255, 237, 213, 170),
            last_move_to=QColor(253, 186, 116, 140),
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(0, 0, 0),
            coord_light=QColor(148, 163, 184),
            coord_dark=QColor(226, 232, 240),
        )

    @classmethod
    def by_name(cls, name: str) -> BoardTheme:
        """Theme for a settings name; unknown names fall back to Classic."""
        return {"Classic": cls.default, "Slate": cls.slate}.get(name, cls.default)()


THEME_NAMES: tuple[str, ...] = ("Classic", "Slate")


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Adwaita Sans", "Helvetica Neue", sans-serif;
}

QLabel#turnLabel {
    background: #1e293b;
    border-radius: 10px;
    padding: 8px 16px;
    font-size: 16px;
}

QGraphicsView {
    border: 1px solid #3a3a3a;
    background: #2b2b2b;
}

QStatusBar {
    color: #a0a0a0;
}
"""
