"""Retrieval of paginated dictionary definitions."""

import logging
import re

from lexilookup.config import LookupConfig
from lexilookup.exceptions import NotFoundError
from lexilookup.interfaces import ContentFetcher
from lexilookup.models import RawPage
from lexilookup.utils import quote_term

logger = logging.getLogger(__name__)

CONTENT_ANCHOR = '<div id="lexicontent">'

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

_TAG_PATTERN = re.compile(
    r"<!--.*?-->|<(?P<close>/)?(?P<name>[a-zA-Z][\w:-]*)\b[^>]*?(?P<self>/)?>",
    re.DOTALL,
)


def balanced_element_end(body: str, start: int) -> int | None:
    """Find the end of the element opening at start.

    Nesting is tracked for the tag name of the opening element only, so
    unclosed paragraphs or list items inside it do not confuse the count.
    Comments are skipped.

    Args:
        body: Markup to scan
        start: Offset of the opening "<" of the element

    Returns:
        Offset just past the matching closing tag, or None if the element
        is never closed
    """
    opening = _TAG_PATTERN.match(body, start)
    if opening is None or opening.group("name") is None or opening.group("close"):
        return None

    name = opening.group("name").lower()
    if name in VOID_ELEMENTS or opening.group("self"):
        return opening.end()

    depth = 0
    for match in _TAG_PATTERN.finditer(body, start):
        tag = match.group("name")
        if tag is None or tag.lower() != name or match.group("self"):
            continue
        depth += -1 if match.group("close") else 1
        if depth == 0:
            return match.end()
    return None


class DefinitionPaginator:
    """Fetch every definition page of a term, in page order.

    The first page holds the primary definition and announces how many
    further pages exist. Pagination is all-or-nothing: a failure on any
    page aborts the whole lookup.
    """

    def __init__(self, config: LookupConfig, fetcher: ContentFetcher):
        """Initialize the paginator.

        Args:
            config: Configuration providing the dictionary base URL
            fetcher: Content fetcher used for every page
        """
        self.config = config
        self.fetcher = fetcher

    def page_url(self, term: str, page_index: int = 0) -> str:
        """Build the URL of a definition page (index 0 is the base page)."""
        url = f"{self.config.definition_base_url}/{quote_term(term)}"
        return url if page_index == 0 else f"{url}/{page_index}"

    def fetch_all(self, term: str) -> list[str]:
        """Fetch and extract every definition block of term.

        Args:
            term: Word to define

        Returns:
            One raw HTML block per page; block 0 comes from the base page

        Raises:
            NetworkError: If any page cannot be fetched
            NotFoundError: If a page has no definition content
        """
        first = self.fetcher.fetch(self.page_url(term), 0)
        blocks = [self.extract_block(first, term)]

        count = self.page_count(first.body, term)
        logger.debug(f"{term}: {count} additional definition page(s)")

        for index in range(1, count + 1):
            page = self.fetcher.fetch(self.page_url(term, index), index)
            blocks.append(self.extract_block(page, term))

        return blocks

    @staticmethod
    def extract_block(page: RawPage, term: str) -> str:
        """Extract the definition element of a page.

        Args:
            page: Fetched page
            term: Term being defined (for error reporting)

        Returns:
            Markup from the content anchor to the close of its element

        Raises:
            NotFoundError: If the content anchor is missing
        """
        start = page.body.find(CONTENT_ANCHOR)
        if start < 0:
            raise NotFoundError(term)

        end = balanced_element_end(page.body, start)
        if end is None:
            logger.warning(f"Unterminated definition block on {page.url}")
            end = len(page.body)

        return page.body[start:end]

    @staticmethod
    def page_count(body: str, term: str) -> int:
        """Read the number of additional pages announced by the base page.

        Tab links look like '/definition/{term}//{N}'; the highest N is the
        number of pages after the first one.

        Args:
            body: Base page body
            term: Term being defined

        Returns:
            Number of additional pages, 0 if no indicator is present
        """
        variants = {re.escape(term), re.escape(quote_term(term))}
        pattern = re.compile(rf"'/definition/(?:{'|'.join(variants)})//([0-9]+)'")
        counts = [int(match.group(1)) for match in pattern.finditer(body)]
        return max(counts, default=0)
