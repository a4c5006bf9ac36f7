"""Qt adapters for the surface and clipboard protocols."""

from PyQt6 import sip
from PyQt6.QtGui import QTextCursor
from PyQt6.QtWidgets import QApplication, QPlainTextEdit

from lexilookup.exceptions import OriginGoneError
from lexilookup.views import word_bounds


class QtMarker:
    """A document range held by a QTextCursor, which Qt moves with every edit.

    Implements RangeMarker protocol.
    """

    def __init__(self, cursor: QTextCursor):
        self._cursor = cursor

    def span(self) -> tuple[int, int]:
        return (self._cursor.selectionStart(), self._cursor.selectionEnd())


class QtTextSurface:
    """Expose a QPlainTextEdit as an editable surface.

    Implements Surface protocol. The adapter notices when its widget is
    destroyed so pending lookups cannot write into a dead editor.
    """

    def __init__(self, editor: QPlainTextEdit, name: str = "document"):
        self.name = name
        self._editor = editor
        self._destroyed = False
        editor.destroyed.connect(self._on_destroyed)

    def _on_destroyed(self, *_args) -> None:
        self._destroyed = True

    @property
    def is_alive(self) -> bool:
        return not self._destroyed and not sip.isdeleted(self._editor)

    @property
    def is_writable(self) -> bool:
        return self.is_alive and not self._editor.isReadOnly()

    @property
    def text(self) -> str:
        return self._editor.toPlainText()

    @property
    def cursor(self) -> int:
        return self._editor.textCursor().position()

    @property
    def selection(self) -> tuple[int, int] | None:
        cursor = self._editor.textCursor()
        if not cursor.hasSelection():
            return None
        return (cursor.selectionStart(), cursor.selectionEnd())

    def word_bounds_at(self, position: int) -> tuple[int, int] | None:
        return word_bounds(self.text, position)

    def add_marker(self, start: int, end: int) -> QtMarker:
        return QtMarker(self._range_cursor(start, end))

    def replace_range(self, start: int, end: int, text: str) -> None:
        if not self.is_writable:
            raise OriginGoneError(f"{self.name} n'est plus modifiable")
        cursor = self._range_cursor(start, end)
        cursor.insertText(text)
        self._editor.setTextCursor(cursor)

    def _range_cursor(self, start: int, end: int) -> QTextCursor:
        cursor = QTextCursor(self._editor.document())
        cursor.setPosition(start)
        cursor.setPosition(end, QTextCursor.MoveMode.KeepAnchor)
        return cursor


class QtClipboard:
    """Copy tokens to the system clipboard.

    Implements Clipboard protocol.
    """

    def copy(self, text: str) -> None:
        QApplication.clipboard().setText(text)
