"""Lookup pipelines, one per lookup kind."""

from lexilookup.config import LookupConfig
from lexilookup.interfaces import ContentFetcher, LookupPipeline
from lexilookup.models import (
    ConjugationRecord,
    DefinitionRecord,
    LookupKind,
    RenderedContent,
    SynonymRecord,
)
from lexilookup.services import (
    ConjugationService,
    DefinitionPaginator,
    HttpContentFetcher,
    RecordExtractor,
)
from lexilookup.utils import quote_term

from .renderers import render_conjugation, render_definitions, render_synonyms


class SynonymPipeline:
    """Fetch a synonym page and extract its synonym and antonym lists."""

    kind = LookupKind.SYNONYM

    def __init__(self, config: LookupConfig, fetcher: ContentFetcher):
        self.config = config
        self.fetcher = fetcher
        self.extractor = RecordExtractor()

    def url_for(self, term: str) -> str:
        return f"{self.config.synonyms_base_url}/{quote_term(term)}"

    def run(self, term: str) -> SynonymRecord:
        page = self.fetcher.fetch(self.url_for(term))
        return self.extractor.extract_synonyms(page.body)

    def render(self, term: str, record: SynonymRecord) -> RenderedContent:
        return render_synonyms(term, record)


class DefinitionPipeline:
    """Fetch every definition page of a term."""

    kind = LookupKind.DEFINITION

    def __init__(self, config: LookupConfig, fetcher: ContentFetcher):
        self.config = config
        self.paginator = DefinitionPaginator(config, fetcher)

    def run(self, term: str) -> DefinitionRecord:
        return DefinitionRecord(blocks=self.paginator.fetch_all(term))

    def render(self, term: str, record: DefinitionRecord) -> RenderedContent:
        return render_definitions(term, record, source=self.paginator.page_url(term))


class ConjugationPipeline:
    """Ask the external checker for a conjugation table."""

    kind = LookupKind.CONJUGATION

    def __init__(self, service: ConjugationService):
        self.service = service

    def run(self, term: str) -> ConjugationRecord:
        return self.service.conjugate(term)

    def render(self, term: str, record: ConjugationRecord) -> RenderedContent:
        return render_conjugation(record)


def create_pipeline(
    kind: LookupKind,
    config: LookupConfig,
    fetcher: ContentFetcher | None = None,
    conjugation_service: ConjugationService | None = None,
) -> LookupPipeline:
    """Build the pipeline serving a lookup kind.

    Args:
        kind: Lookup kind
        config: Configuration shared by the pipeline components
        fetcher: Content fetcher (an HTTP fetcher is created if omitted)
        conjugation_service: Conjugation backend (created from config if omitted)

    Returns:
        Pipeline instance for kind
    """
    if kind is LookupKind.CONJUGATION:
        return ConjugationPipeline(conjugation_service or ConjugationService(config))

    fetcher = fetcher or HttpContentFetcher(config)
    if kind is LookupKind.SYNONYM:
        return SynonymPipeline(config, fetcher)
    return DefinitionPipeline(config, fetcher)
