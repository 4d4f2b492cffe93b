"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from chessgui.config import GuiConfig

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)


def _configure_application(app: QApplication, config: GuiConfig) -> None:
    """Apply app-wide settings and theme."""
    from chessgui.ui.styles.theme import APP_STYLE

    app.setApplicationName(config.window_title)
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(
    argv: list[str] | None = None, config: GuiConfig | None = None
) -> int:
    """Create and run the main Qt application.

    Asset loading failures propagate out of here before the event loop
    starts.
    """
    from PyQt6.QtWidgets import QApplication

    from chessgui.ui.main_window import MainWindow

    config = config if config is not None else GuiConfig()
    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app, config)

    window = MainWindow(config)
    window.show()
    _LOGGER.info(
        "Started %dx%d board window", config.window_width, config.window_height
    )

    return app.exec()
