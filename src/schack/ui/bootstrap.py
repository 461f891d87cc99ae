"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING

from schack.ui.resources import preload_sprites

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)

LOG_LEVEL_ENV = "SCHACK_LOG_LEVEL"
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging; level from ``SCHACK_LOG_LEVEL`` by default."""
    name = (level or os.environ.get(LOG_LEVEL_ENV) or "WARNING").upper()
    numeric = logging.getLevelName(name)
    if not isinstance(numeric, int):
        numeric = logging.WARNING
    logging.basicConfig(level=numeric, format=_LOG_FORMAT)
    if name != logging.getLevelName(numeric):
        _LOGGER.warning("Unknown log level %r, using WARNING", name)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from schack.ui.styles.theme import APP_STYLE

    app.setApplicationName("Schack")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(argv: list[str] | None = None) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from schack.ui.main_window import MainWindow

    configure_logging()
    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    # Missing sprites are fatal: fail before the window opens.
    preload_sprites()

    window = MainWindow()
    window.show()

    return app.exec()
