"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from fenboard.config import AppSettings
from fenboard.core.position import Position

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

    from fenboard.ui.board_view import BoardWindow

_LOGGER = logging.getLogger(__name__)


def _configure_application(app: QApplication, settings: AppSettings) -> None:
    """Apply app-wide font and name."""
    from PyQt6.QtGui import QFont

    app.setApplicationName("fenboard")
    app.setStyle("Fusion")
    font = QFont(settings.font_family, settings.font_point_size)
    font.setStyleHint(QFont.StyleHint.Monospace)
    if not font.exactMatch():
        _LOGGER.warning("Font %r not available, using a substitute", settings.font_family)
    app.setFont(font)


def create_window(position: Position, settings: AppSettings) -> BoardWindow:
    """Build (but do not show) the viewer window for *position*."""
    from PyQt6.QtGui import QFont

    from fenboard.ui.board_view import BoardWindow

    window = BoardWindow(position, unicode=settings.use_unicode)
    font = QFont(settings.font_family, settings.font_point_size)
    font.setStyleHint(QFont.StyleHint.Monospace)
    window.board_view.setFont(font)
    return window


def run_application(
    position: Position,
    settings: AppSettings,
    argv: list[str] | None = None,
) -> int:
    """Create and run the viewer application."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app, settings)

    window = create_window(position, settings)
    window.resize(420, 360)
    window.show()
    _LOGGER.info("Showing position %s", position.to_fen())

    return app.exec()
