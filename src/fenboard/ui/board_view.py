"""Read-only monospaced view of a rendered position."""

from __future__ import annotations

from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QMainWindow, QPlainTextEdit, QWidget

from fenboard.core.position import Position
from fenboard.display import format_position


class BoardTextView(QPlainTextEdit):
    """Shows the text grid produced by :func:`fenboard.display.format_position`."""

    def __init__(
        self,
        position: Position | None = None,
        *,
        unicode: bool = False,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._position = position if position is not None else Position.initial()
        self._unicode = unicode

        self.setReadOnly(True)
        self.setLineWrapMode(QPlainTextEdit.LineWrapMode.NoWrap)
        font = QFont("Monospace")
        font.setStyleHint(QFont.StyleHint.Monospace)
        self.setFont(font)
        self._refresh()

    @property
    def position(self) -> Position:
        return self._position

    def set_position(self, position: Position) -> None:
        self._position = position
        self._refresh()

    def set_unicode(self, enabled: bool) -> None:
        """Toggle chess glyphs instead of ASCII letters."""
        if enabled == self._unicode:
            return
        self._unicode = enabled
        self._refresh()

    def text(self) -> str:
        return self.toPlainText()

    def _refresh(self) -> None:
        self.setPlainText(format_position(self._position, unicode=self._unicode))


class BoardWindow(QMainWindow):
    """Top-level window holding a single :class:`BoardTextView`."""

    def __init__(
        self,
        position: Position,
        *,
        unicode: bool = False,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.board_view = BoardTextView(position, unicode=unicode, parent=self)
        self.setCentralWidget(self.board_view)
        self.setWindowTitle(position.to_fen())
