"""Extraction of word lists from synonym dictionary pages."""

import html
import logging
import re

from lexilookup.exceptions import ExtractionEmpty
from lexilookup.models import SynonymRecord

logger = logging.getLogger(__name__)

SYNONYM_LIST = "synonymes"
ANTONYM_LIST = "antonymes"

# A hyperlink-wrapped word, optionally followed by a comma
TOKEN_PATTERN = re.compile(r"<a\s+href=[^>]*>([^<]+)</a>,?")


class RecordExtractor:
    """Pull word lists out of a page bounded by textual markers (stateless service).

    The page announces a list with a labeled count ("<i class=...>12
    synonymes") and closes it with a comment ("<!--Fin liste des
    synonymes-->"). Only the text between those two markers is searched
    for words. A missing marker yields an empty list, never an error.
    """

    @staticmethod
    def start_marker(list_name: str) -> re.Pattern[str]:
        return re.compile(rf"<i\s+class=[^>]*>\s*[0-9]+\s+{re.escape(list_name)}")

    @staticmethod
    def end_marker(list_name: str) -> str:
        return f"<!--Fin liste des {list_name}-->"

    def extract(self, body: str, list_name: str) -> list[str]:
        """Extract the words of one list, in document order.

        Args:
            body: Raw page body
            list_name: List label, e.g. "synonymes" or "antonymes"

        Returns:
            Words between the list markers (possibly empty)
        """
        start = self.start_marker(list_name).search(body)
        if start is None:
            logger.debug(f"Start marker for {list_name} not found")
            return []

        end = body.find(self.end_marker(list_name), start.end())
        if end < 0:
            logger.debug(f"End marker for {list_name} not found")
            return []

        region = body[start.end() : end]
        words = [html.unescape(match.group(1)) for match in TOKEN_PATTERN.finditer(region)]

        if not words:
            logger.debug(str(ExtractionEmpty(list_name)))

        return words

    def extract_synonyms(self, body: str) -> SynonymRecord:
        """Extract both the synonym and antonym lists of a page.

        Args:
            body: Raw page body

        Returns:
            Record with both lists; either may be empty
        """
        return SynonymRecord(
            synonyms=self.extract(body, SYNONYM_LIST),
            antonyms=self.extract(body, ANTONYM_LIST),
        )
