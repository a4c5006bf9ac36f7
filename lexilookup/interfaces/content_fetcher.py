"""Protocol for retrieving remote pages."""

from typing import Protocol

from lexilookup.models import RawPage


class ContentFetcher(Protocol):
    """Interface for the only component that touches the network.

    Fetching is synchronous: the caller is suspended until the response
    completes, fails, or times out.
    """

    def fetch(self, url: str, page_index: int = 0) -> RawPage:
        """Fetch a URL and return its body decoded as UTF-8.

        Args:
            url: Absolute URL to fetch
            page_index: Position of the page in a paginated result

        Returns:
            The fetched page

        Raises:
            NetworkError: On transport failure, bad status or undecodable body
        """
        ...
