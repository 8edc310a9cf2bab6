"""IMDb search URL builder."""

from urllib.parse import quote


class IMDBUrlBuilder:
    """Builds IMDb search page URLs.

    Queries passed to the ``build_*`` methods must already be
    encoded with ``encode_query``.
    """

    # -------------------------------------------------------------------------
    # Query Encoding
    # -------------------------------------------------------------------------

    @staticmethod
    def encode_query(query: str) -> str:
        """Percent-encode a query, keeping only unreserved characters.

        Args:
            query: Raw search text.

        Returns:
            Encoded query (spaces become %20).
        """
        return quote(query, safe="")

    # -------------------------------------------------------------------------
    # Search URLs
    # -------------------------------------------------------------------------

    @staticmethod
    def build_title_search_url(
        base_url: str,
        query: str,
        start: int,
        count: int,
    ) -> str:
        """Build advanced title search URL.

        Args:
            base_url: Site base URL.
            query: Encoded title query.
            start: 1-based offset of the first result.
            count: Results per page.

        Returns:
            Complete search URL.
        """
        return f"{base_url}/search/title/?title={query}&start={start}&count={count}"

    @staticmethod
    def build_find_url(base_url: str, query: str) -> str:
        """Build quick find URL restricted to titles.

        Args:
            base_url: Site base URL.
            query: Encoded title query.

        Returns:
            Complete find URL.
        """
        return f"{base_url}/find?s=tt&q={query}"
