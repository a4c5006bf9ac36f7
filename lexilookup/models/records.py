"""Data models for extracted lookup results."""

from dataclasses import dataclass, field
from typing import Union


@dataclass
class SynonymRecord:
    """Synonyms and antonyms of a word, in document order."""

    synonyms: list[str] = field(default_factory=list)
    antonyms: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """Both lists empty: the word was not found (distinct from a fetch error)."""
        return not self.synonyms and not self.antonyms

    def __str__(self) -> str:
        return f"SynonymRecord(synonyms={len(self.synonyms)}, antonyms={len(self.antonyms)})"


@dataclass
class DefinitionRecord:
    """Raw definition blocks, one per dictionary page, in page order."""

    blocks: list[str] = field(default_factory=list)


@dataclass
class ConjugationRecord:
    """Formatted conjugation table as produced by the external checker."""

    verb: str
    table: str


ExtractedRecord = Union[SynonymRecord, DefinitionRecord, ConjugationRecord]
