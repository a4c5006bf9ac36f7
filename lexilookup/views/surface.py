"""Text surfaces and the weak handles lookups keep on them."""

from __future__ import annotations

import logging
import re
import weakref
from pathlib import Path

from lexilookup.exceptions import OriginGoneError
from lexilookup.interfaces import RangeMarker, Surface

logger = logging.getLogger(__name__)

# Letters and digits, hyphenated compounds kept whole ("peut-être")
WORD_PATTERN = re.compile(r"\w+(?:-\w+)*")


def word_bounds(text: str, position: int) -> tuple[int, int] | None:
    """Return the bounds of the word containing or ending at position."""
    for match in WORD_PATTERN.finditer(text):
        if match.start() <= position <= match.end():
            return match.span()
        if match.start() > position:
            break
    return None


class TextMarker:
    """A [start, end) range of a TextSurface that follows its edits.

    Implements RangeMarker protocol.
    """

    def __init__(self, start: int, end: int):
        self.start = start
        self.end = end

    def span(self) -> tuple[int, int]:
        return (self.start, self.end)

    def shift(self, start: int, end: int, inserted: int) -> None:
        """Adjust to text[start:end] having been replaced by `inserted` characters.

        Offsets after the edit move with it, offsets inside the replaced
        text collapse to its start. An insertion exactly at an offset
        pushes that offset forward.
        """
        delta = inserted - (end - start)

        def moved(offset: int) -> int:
            if offset < start or (offset == start and end > start):
                return offset
            if offset >= end:
                return offset + delta
            return start

        self.start, self.end = moved(self.start), moved(self.end)


class TextSurface:
    """An in-memory editable document with a cursor and optional selection.

    Implements Surface protocol.
    """

    def __init__(self, text: str = "", name: str = "untitled", read_only: bool = False):
        self.name = name
        self._text = text
        self._cursor = 0
        self._selection: tuple[int, int] | None = None
        self._read_only = read_only
        self._alive = True
        self._markers: weakref.WeakSet[TextMarker] = weakref.WeakSet()

    @property
    def is_alive(self) -> bool:
        return self._alive

    @property
    def is_writable(self) -> bool:
        return not self._read_only

    @property
    def text(self) -> str:
        return self._text

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def selection(self) -> tuple[int, int] | None:
        return self._selection

    def set_cursor(self, position: int) -> None:
        self._cursor = max(0, min(position, len(self._text)))
        self._selection = None

    def select(self, start: int, end: int) -> None:
        """Select text[start:end] and put the cursor at its end."""
        start, end = sorted((max(0, start), min(end, len(self._text))))
        self._selection = (start, end)
        self._cursor = end

    def offset_of(self, line: int, column: int) -> int:
        """Convert a 1-based line and column to a character offset."""
        lines = self._text.split("\n")
        if not 1 <= line <= len(lines):
            raise ValueError(f"Line {line} out of range (1-{len(lines)})")
        offset = sum(len(previous) + 1 for previous in lines[: line - 1])
        return offset + max(0, min(column - 1, len(lines[line - 1])))

    def word_bounds_at(self, position: int) -> tuple[int, int] | None:
        return word_bounds(self._text, position)

    def word_at(self, position: int) -> str | None:
        bounds = self.word_bounds_at(position)
        return self._text[bounds[0] : bounds[1]] if bounds else None

    def add_marker(self, start: int, end: int) -> TextMarker:
        """Track text[start:end] through later edits.

        The surface only holds markers weakly; a marker stops being updated
        once its owner drops it.
        """
        marker = TextMarker(start, end)
        self._markers.add(marker)
        return marker

    def replace_range(self, start: int, end: int, text: str) -> None:
        if not self._alive:
            raise OriginGoneError(f"{self.name} has been closed")
        if self._read_only:
            raise OriginGoneError(f"{self.name} is read-only")
        self._text = self._text[:start] + text + self._text[end:]
        self._cursor = start + len(text)
        self._selection = None
        for marker in list(self._markers):
            marker.shift(start, end, len(text))

    def close(self) -> None:
        self._alive = False

    def __repr__(self) -> str:
        return f"TextSurface(name='{self.name}', size={len(self._text)}, alive={self._alive})"


class FileSurface(TextSurface):
    """A text surface backed by a UTF-8 file."""

    def __init__(self, path: Path):
        self.path = Path(path)
        super().__init__(self.path.read_text(encoding="utf-8"), name=self.path.name)

    def save(self) -> None:
        self.path.write_text(self.text, encoding="utf-8")
        logger.info(f"Saved {self.path}")


class SurfaceHandle:
    """Weak back-reference to the part of a surface a lookup was requested for.

    The target range (the active selection, else the word at the insertion
    point) is tracked by a marker on the surface, so edits made elsewhere
    while the result is open do not move it. The handle never keeps its
    surface alive. Reading needs a live surface; replacing also needs a
    writable one whose target still holds the looked-up text.
    """

    def __init__(self, surface: Surface, start: int, end: int):
        self._ref = weakref.ref(surface)
        self._marker: RangeMarker = surface.add_marker(start, end)
        self.original_text = surface.text[start:end]

    @classmethod
    def capture(cls, surface: Surface, position: int | None = None) -> SurfaceHandle:
        """Remember the active selection, else the word at position (default: the cursor)."""
        selection = surface.selection
        if selection is not None:
            return cls(surface, *selection)

        if position is None:
            position = surface.cursor
        position = max(0, min(position, len(surface.text)))
        start, end = surface.word_bounds_at(position) or (position, position)
        return cls(surface, start, end)

    @property
    def surface(self) -> Surface | None:
        return self._ref()

    def is_alive(self) -> bool:
        surface = self._ref()
        return surface is not None and surface.is_alive

    def is_writable(self) -> bool:
        return self.is_alive() and self._ref().is_writable

    def assert_alive(self) -> Surface:
        """Return the surface, or raise OriginGoneError if it was closed."""
        surface = self._ref()
        if surface is None or not surface.is_alive:
            raise OriginGoneError("Le document d'origine a été fermé")
        return surface

    def assert_writable(self) -> Surface:
        """Return the surface, or raise OriginGoneError if it cannot be edited."""
        surface = self.assert_alive()
        if not surface.is_writable:
            raise OriginGoneError("Le document d'origine n'est pas modifiable")
        return surface

    def target_range(self) -> tuple[int, int]:
        """Current offsets of the range the lookup was requested for."""
        self.assert_alive()
        return self._marker.span()

    def word(self) -> str:
        """Current text of the target range."""
        surface = self.assert_alive()
        start, end = self._marker.span()
        return surface.text[start:end]

    def replace(self, text: str) -> None:
        """Replace the target range with text.

        Raises:
            OriginGoneError: If the surface is gone or read-only, or if the
                target no longer holds the looked-up text
        """
        surface = self.assert_writable()
        start, end = self._marker.span()
        if surface.text[start:end] != self.original_text:
            raise OriginGoneError(
                f"« {self.original_text} » a été modifié dans le document d'origine"
            )

        surface.replace_range(start, end, text)
        self._marker = surface.add_marker(start, start + len(text))
        self.original_text = text
