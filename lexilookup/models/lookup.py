"""Data models describing a lookup request."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lexilookup.views.surface import SurfaceHandle


class LookupKind(Enum):
    """Which remote source and extraction pipeline a lookup uses."""

    SYNONYM = "synonym"
    DEFINITION = "definition"
    CONJUGATION = "conjugation"

    @property
    def label(self) -> str:
        """French heading used in rendered views."""
        return {
            LookupKind.SYNONYM: "Synonymes",
            LookupKind.DEFINITION: "Définition",
            LookupKind.CONJUGATION: "Conjugaison",
        }[self]

    @property
    def has_tokens(self) -> bool:
        """Whether the rendered output is a list of replaceable tokens."""
        return self is not LookupKind.DEFINITION


@dataclass
class LookupSession:
    """A lookup in progress: what was asked, and by which surface."""

    kind: LookupKind
    term: str
    origin: SurfaceHandle | None = None  # Weak back-reference, never ownership

    def __post_init__(self):
        if not isinstance(self.term, str) or not self.term.strip():
            raise ValueError("Lookup term must be a non-empty string")
        self.term = self.term.strip()

    def __str__(self) -> str:
        return f"{self.kind.label} de {self.term}"


@dataclass(frozen=True)
class RawPage:
    """A fetched page body, decoded as text."""

    url: str
    body: str
    page_index: int = 0

    def __repr__(self) -> str:
        return f"RawPage(url='{self.url}', page_index={self.page_index}, size={len(self.body)})"
