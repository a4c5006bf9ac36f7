"""In-process clipboard for copied result tokens."""

from collections import deque


class TokenClipboard:
    """Keep the most recently copied tokens, newest first.

    Implements Clipboard protocol.
    """

    def __init__(self, max_entries: int = 20):
        self._entries: deque[str] = deque(maxlen=max_entries)

    def copy(self, text: str) -> None:
        self._entries.appendleft(text)

    @property
    def latest(self) -> str | None:
        return self._entries[0] if self._entries else None

    @property
    def history(self) -> list[str]:
        return list(self._entries)
