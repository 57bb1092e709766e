"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from chesstrainer.ui.settings import AppSettings

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication, QMainWindow

_LOGGER = logging.getLogger(__name__)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from chesstrainer.ui.styles.theme import APP_STYLE

    app.setApplicationName("Chess Trainer")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def create_window(settings: AppSettings) -> QMainWindow:
    """Build the window for the configured mode."""
    if settings.mode == "squares":
        from chesstrainer.ui.trainer_window import TrainerWindow

        return TrainerWindow(settings)

    from chesstrainer.ui.game_window import GameWindow

    return GameWindow(settings)


def run_application(settings: AppSettings, argv: list[str] | None = None) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    _LOGGER.info("Starting in %s mode", settings.mode)
    window = create_window(settings)
    window.show()

    return app.exec()
