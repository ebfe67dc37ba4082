"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from chessgrid.ui.settings import AppSettings

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)


def configure_logging(settings: AppSettings) -> None:
    """Root logging setup; unknown level names fall back to WARNING."""
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        level = logging.WARNING
        _LOGGER.warning("Unknown log level %r, using WARNING", settings.log_level)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from chessgrid.ui.styles.theme import APP_STYLE

    app.setApplicationName("chessgrid")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(
    argv: list[str] | None = None,
    settings: AppSettings | None = None,
) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from chessgrid.session.commands import CommandDispatcher
    from chessgrid.ui.main_window import MainWindow

    if settings is None:
        settings = AppSettings.from_env()
    configure_logging(settings)

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow(CommandDispatcher(), settings)
    window.show()
    _LOGGER.info("chessgrid started")

    return app.exec()
