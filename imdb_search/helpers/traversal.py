"""Element traversal over parsed documents and elements.

A ``BeautifulSoup`` document is itself a ``Tag``, so every helper
here works the same on a whole page or on a single element.
"""

from bs4 import BeautifulSoup, Tag

from imdb_search.exceptions import DecodingError
from imdb_search.helpers.selectors import compile_selector

_PARSER = "html.parser"


def parse_document(html: str | bytes) -> BeautifulSoup:
    """Parse raw HTML into a searchable document.

    Args:
        html: HTML text, or raw bytes expected to be UTF-8.

    Returns:
        Parsed document.

    Raises:
        DecodingError: If bytes are not valid UTF-8.
    """
    if isinstance(html, bytes):
        try:
            html = html.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodingError(f"Response body is not valid UTF-8: {e}") from e

    return BeautifulSoup(html, _PARSER)


def find_first(node: Tag, selector: str) -> Tag | None:
    """Return the first descendant matching selector, in document order.

    Args:
        node: Document or element to search.
        selector: CSS selector text.

    Returns:
        Matching element, or None if nothing matches.
    """
    return compile_selector(selector).select_one(node)


def find_all(node: Tag, selector: str) -> list[Tag]:
    """Return all descendants matching selector, in document order.

    Args:
        node: Document or element to search.
        selector: CSS selector text.

    Returns:
        Matching elements, possibly empty.
    """
    return compile_selector(selector).select(node)


def inner_html(element: Tag) -> str:
    """Return the element's inner markup."""
    return element.decode_contents()
