"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from chessclick.settings import AppSettings

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)


def _configure_logging(settings: AppSettings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _configure_application(app: QApplication, settings: AppSettings) -> None:
    """Apply app-wide settings."""
    app.setApplicationName(settings.window_title)
    app.setStyle("Fusion")


def run_application(settings: AppSettings, argv: list[str] | None = None) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from chessclick.ui.main_window import MainWindow

    _configure_logging(settings)
    app = QApplication(sys.argv[:1] if argv is None else argv)
    _configure_application(app, settings)

    window = MainWindow(settings)
    window.show()
    _LOGGER.info(
        "Board ready (%dx%d, game over policy: %s)",
        settings.window_width,
        settings.window_height,
        settings.on_game_over.value,
    )

    return app.exec()
