"""Protocol for editable text surfaces that can request lookups."""

from typing import Protocol


class RangeMarker(Protocol):
    """A range of a surface that keeps pointing at the same text while it is edited."""

    def span(self) -> tuple[int, int]:
        """Current (start, end) offsets of the range."""
        ...


class Surface(Protocol):
    """A document the user edits (in-memory buffer, file, editor widget...).

    Implementations must be weak-referenceable: lookup sessions never keep
    their originating surface alive.
    """

    @property
    def is_alive(self) -> bool:
        """False once the surface has been closed or destroyed."""
        ...

    @property
    def is_writable(self) -> bool:
        """False for read-only surfaces."""
        ...

    @property
    def text(self) -> str:
        ...

    @property
    def cursor(self) -> int:
        """Insertion point as a character offset."""
        ...

    @property
    def selection(self) -> tuple[int, int] | None:
        """Active selection as (start, end) offsets, or None."""
        ...

    def word_bounds_at(self, position: int) -> tuple[int, int] | None:
        """Return the (start, end) offsets of the word touching position."""
        ...

    def add_marker(self, start: int, end: int) -> RangeMarker:
        """Start tracking text[start:end] through later edits."""
        ...

    def replace_range(self, start: int, end: int, text: str) -> None:
        """Replace text[start:end] with text and move the cursor after it."""
        ...
