"""Data models for rendered result views."""

from dataclasses import dataclass, field
from enum import Enum


class ViewState(Enum):
    """Lifecycle of a result view."""

    IDLE = "idle"
    LOADING = "loading"
    RENDERED = "rendered"
    ERROR = "error"


@dataclass(frozen=True)
class TokenSpan:
    """A selectable token and its [start, end) offsets in the rendered text."""

    token: str
    start: int
    end: int

    def contains(self, position: int) -> bool:
        return self.start <= position < self.end


@dataclass
class RenderedContent:
    """Text shown by a result view plus the spans of its replaceable tokens."""

    text: str = ""
    spans: list[TokenSpan] = field(default_factory=list)

    @property
    def tokens(self) -> list[str]:
        return [span.token for span in self.spans]

    def token_at(self, position: int) -> str | None:
        """Return the token whose span contains position, if any."""
        for span in self.spans:
            if span.contains(position):
                return span.token
        return None
