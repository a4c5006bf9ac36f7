"""Protocol for the copy target of result tokens."""

from typing import Protocol


class Clipboard(Protocol):
    """Somewhere a selected token can be copied for later reuse."""

    def copy(self, text: str) -> None:
        ...
