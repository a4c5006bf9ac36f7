"""Exceptions raised while fetching and extracting lookup results."""

from .base import LexiLookupException


class NetworkError(LexiLookupException):
    """Raised when a page cannot be fetched or decoded.

    Attributes:
        url: The URL that was requested
        cause: The underlying transport or decoding error
    """

    def __init__(self, url: str, cause: BaseException | str):
        self.url = url
        self.cause = cause
        super().__init__(f"Impossible de récupérer {url} : {cause}")


class NotFoundError(LexiLookupException):
    """Raised when the remote source has no entry for a term."""

    def __init__(self, term: str):
        self.term = term
        super().__init__(f"Aucun résultat pour « {term} »")


class ExtractionEmpty(LexiLookupException):
    """Markers were present but no token could be extracted."""

    def __init__(self, list_name: str):
        self.list_name = list_name
        super().__init__(f"No {list_name} found between list markers")
