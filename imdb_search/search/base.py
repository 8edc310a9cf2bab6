"""Base search strategy abstract class.

A strategy knows how to build the request URL for a query
and how to turn the fetched page into records.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from bs4 import BeautifulSoup

ResultT = TypeVar("ResultT")


class SearchStrategy(ABC, Generic[ResultT]):
    """Abstract base class for IMDb search strategies.

    Attributes:
        name: Strategy identifier used in logs.
    """

    name: str = "base"

    @abstractmethod
    def build_uri(self, base_url: str, query: str) -> str:
        """Build the request URL.

        Args:
            base_url: Site base URL.
            query: Already-encoded query string.

        Returns:
            Fully-qualified request URL.
        """
        pass

    @abstractmethod
    def parse_result(self, document: BeautifulSoup) -> ResultT:
        """Extract records from a parsed search page.

        Args:
            document: Parsed HTML document.

        Returns:
            Strategy-specific result sequence.
        """
        pass
