"""IMDb search engine.

Fetches search pages over HTTP and routes the body to the
extraction strategy that built the request URL.
"""

import logging
from types import TracebackType
from typing import TypeVar

import httpx
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from imdb_search.exceptions import IMDBClientError
from imdb_search.helpers.traversal import parse_document
from imdb_search.search.base import SearchStrategy
from imdb_search.search.by_title import ByTitle
from imdb_search.search.by_title_find import ByTitleFind
from imdb_search.search.types import FoundResults, TitleSearch
from imdb_search.search.url_builder import IMDBUrlBuilder
from imdb_search.settings import settings

logger = logging.getLogger(__name__)

ResultT = TypeVar("ResultT")


class IMDBSearchEngine:
    """HTTP front end for IMDb searches.

    Usage:
        with IMDBSearchEngine() as engine:
            listing = engine.search_titles("star wars", count=50)

    Attributes:
        base_uri: Site base URL used to build request URLs.
    """

    def __init__(
        self,
        base_uri: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize engine with settings.

        Args:
            base_uri: Override for settings.imdb.base_url.
            transport: Optional httpx transport (used by tests).
        """
        self._base_uri = base_uri or settings.imdb.base_url
        self._transport = transport
        self._client: httpx.Client | None = None

    @property
    def base_uri(self) -> str:
        """Site base URL."""
        return self._base_uri

    # -------------------------------------------------------------------------
    # Context Manager
    # -------------------------------------------------------------------------

    def __enter__(self) -> "IMDBSearchEngine":
        """Enter context and create HTTP client."""
        self._client = httpx.Client(
            timeout=settings.imdb.timeout,
            headers={
                "User-Agent": settings.imdb.user_agent,
                "Accept-Language": "en-US,en;q=0.9",
            },
            follow_redirects=True,
            transport=self._transport,
        )
        return self

    def __exit__(
        self,
        _exc_type: type[BaseException] | None,
        _exc_val: BaseException | None,
        _exc_tb: TracebackType | None,
    ) -> None:
        """Exit context and close HTTP client."""
        if self._client:
            self._client.close()
            self._client = None

    # -------------------------------------------------------------------------
    # Search
    # -------------------------------------------------------------------------

    def search_by(self, strategy: SearchStrategy[ResultT], query: str) -> ResultT:
        """Run a search with the given strategy.

        Args:
            strategy: Strategy building the URL and parsing the page.
            query: Raw search text.

        Returns:
            Strategy-specific result sequence.

        Raises:
            IMDBClientError: On HTTP errors.
            DecodingError: If the body is not valid UTF-8.
        """
        encoded_query = IMDBUrlBuilder.encode_query(query)
        uri = strategy.build_uri(self._base_uri, encoded_query)

        body = self._fetch(uri)
        result = strategy.parse_result(parse_document(body))

        logger.info(f"{strategy.name}: {len(result)} results for {query!r}")
        return result

    def search_titles(
        self,
        query: str,
        start: int | None = None,
        count: int | None = None,
    ) -> TitleSearch:
        """Search the advanced title listing.

        Args:
            query: Title text.
            start: 1-based result offset.
            count: Results per page (1-255).

        Returns:
            Parsed listing items.
        """
        return self.search_by(ByTitle(start=start, count=count), query)

    def find_titles(self, query: str) -> FoundResults:
        """Search titles through quick find.

        Args:
            query: Title text.

        Returns:
            Parsed find results.
        """
        return self.search_by(ByTitleFind(), query)

    # -------------------------------------------------------------------------
    # HTTP
    # -------------------------------------------------------------------------

    def _fetch(self, uri: str) -> bytes:
        """GET uri and return the raw body.

        Raises:
            IMDBClientError: On transport failure or error status.
        """
        try:
            response = self._get(uri)
        except httpx.HTTPError as e:
            logger.error(f"Request failed: {uri} ({e})")
            raise IMDBClientError(f"Request failed: {uri}") from e

        return self._handle_response(response, uri)

    @retry(
        retry=retry_if_exception_type(httpx.TimeoutException),
        stop=stop_after_attempt(settings.imdb.max_retries),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        reraise=True,
    )
    def _get(self, uri: str) -> httpx.Response:
        """Execute GET request, retrying on timeouts.

        Raises:
            IMDBClientError: If used outside the context manager.
        """
        if self._client is None:
            msg = "Client not initialized. Use context manager."
            raise IMDBClientError(msg)

        logger.debug(f"GET {uri}")
        try:
            return self._client.get(uri)
        except httpx.TimeoutException:
            logger.warning(f"Request timeout: {uri}")
            raise

    @staticmethod
    def _handle_response(response: httpx.Response, uri: str) -> bytes:
        """Return body of a successful response.

        Raises:
            IMDBClientError: On non-success status codes.
        """
        if response.is_success:
            return response.content

        error_msg = f"IMDb error {response.status_code}: {uri}"
        logger.error(error_msg)
        raise IMDBClientError(error_msg)
