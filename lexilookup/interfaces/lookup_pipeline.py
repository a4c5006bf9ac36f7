"""Protocol for the fetch/extract/render pipeline behind a result view."""

from typing import Protocol

from lexilookup.models import ExtractedRecord, LookupKind, RenderedContent


class LookupPipeline(Protocol):
    """Capability object selected once per result view from its lookup kind."""

    @property
    def kind(self) -> LookupKind:
        """The lookup kind this pipeline serves."""
        ...

    def run(self, term: str) -> ExtractedRecord:
        """Retrieve and extract the record for term.

        Raises:
            NetworkError: If a page cannot be fetched
            NotFoundError: If the source has no entry for term
            CheckerError: If the external checker fails
        """
        ...

    def render(self, term: str, record: ExtractedRecord) -> RenderedContent:
        """Turn an extracted record into displayable text and token spans."""
        ...
