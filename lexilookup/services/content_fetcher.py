"""HTTP implementation of the content fetcher."""

import logging

import requests

from lexilookup.config import LookupConfig
from lexilookup.exceptions import NetworkError
from lexilookup.models import RawPage

logger = logging.getLogger(__name__)


class HttpContentFetcher:
    """Fetch pages over HTTP with requests.

    Implements ContentFetcher protocol. No retries are made: a failed fetch
    is reported immediately and retry policy is left to the caller.
    """

    def __init__(self, config: LookupConfig, session: requests.Session | None = None):
        """Initialize the fetcher.

        Args:
            config: Configuration providing timeout and user agent
            session: Optional requests session (a new one is created if omitted)
        """
        self.config = config
        self._session = session or requests.Session()
        self._session.headers.setdefault("User-Agent", config.user_agent)

    def fetch(self, url: str, page_index: int = 0) -> RawPage:
        """Fetch url and decode its body as UTF-8.

        Args:
            url: Absolute URL to fetch
            page_index: Position of the page in a paginated result

        Returns:
            The fetched page

        Raises:
            NetworkError: On transport failure, non-200 status or invalid UTF-8
        """
        logger.debug(f"Fetching {url}")

        try:
            response = self._session.get(url, timeout=self.config.request_timeout)
        except requests.exceptions.Timeout as e:
            logger.warning(f"Timed out after {self.config.request_timeout}s: {url}")
            raise NetworkError(url, e) from e
        except requests.RequestException as e:
            raise NetworkError(url, e) from e

        if response.status_code != 200:
            raise NetworkError(url, f"HTTP {response.status_code}")

        try:
            body = response.content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise NetworkError(url, e) from e

        return RawPage(url=url, body=body, page_index=page_index)
