"""Render extracted records as text with selectable token spans."""

from lexilookup.models import (
    ConjugationRecord,
    DefinitionRecord,
    RenderedContent,
    SynonymRecord,
    TokenSpan,
)
from lexilookup.utils import conjugated_form, html_to_text

NO_RESULT = "Aucun résultat"
ITEM_PREFIX = "- "
BLOCK_SEPARATOR = "-" * 40


class _ContentBuilder:
    """Accumulate lines while recording the offsets of token spans."""

    def __init__(self):
        self._parts: list[str] = []
        self._length = 0
        self._spans: list[TokenSpan] = []

    def line(self, text: str = "") -> None:
        self._parts.append(text + "\n")
        self._length += len(text) + 1

    def item(self, text: str, token: str) -> None:
        """Add a list item whose text (after the bullet) selects token."""
        start = self._length + len(ITEM_PREFIX)
        self._spans.append(TokenSpan(token, start, start + len(text)))
        self.line(ITEM_PREFIX + text)

    def build(self) -> RenderedContent:
        return RenderedContent(text="".join(self._parts).rstrip("\n"), spans=self._spans)


def render_synonyms(term: str, record: SynonymRecord) -> RenderedContent:
    """Render synonyms and antonyms as two headed lists.

    A list without items shows a placeholder; when both are empty the whole
    body is a single placeholder.
    """
    builder = _ContentBuilder()
    builder.line(f"* Synonymes de {term}")
    builder.line()

    if record.is_empty:
        builder.line(NO_RESULT)
        return builder.build()

    for heading, words in (("Synonymes", record.synonyms), ("Antonymes", record.antonyms)):
        builder.line(f"** {heading}")
        if not words:
            builder.line(NO_RESULT)
        for word in words:
            builder.item(word, word)
        builder.line()

    return builder.build()


def render_definitions(term: str, record: DefinitionRecord, source: str = "") -> RenderedContent:
    """Render definition blocks as readable text, in page order."""
    builder = _ContentBuilder()
    builder.line(f"* Définition de {term}")
    builder.line()

    for index, block in enumerate(record.blocks):
        if index:
            builder.line(BLOCK_SEPARATOR)
            builder.line()
        for text_line in html_to_text(block).splitlines():
            builder.line(text_line)
        builder.line()

    if source:
        builder.line(f"Source : {source}")

    return builder.build()


def render_conjugation(record: ConjugationRecord) -> RenderedContent:
    """Render a conjugation table; each "- " entry selects its conjugated form."""
    builder = _ContentBuilder()
    for text_line in record.table.splitlines():
        if text_line.startswith(ITEM_PREFIX):
            entry = text_line[len(ITEM_PREFIX) :]
            token = conjugated_form(entry)
            if token:
                builder.item(entry, token)
                continue
        builder.line(text_line)
    return builder.build()
