"""Quick find search restricted to titles (``/find?s=tt``)."""

import logging

from bs4 import BeautifulSoup, Tag

from imdb_search.helpers.anchor import parse_anchor
from imdb_search.helpers.traversal import find_all, find_first, parse_document
from imdb_search.search.base import SearchStrategy
from imdb_search.search.types import FoundItem, FoundResults
from imdb_search.search.url_builder import IMDBUrlBuilder

logger = logging.getLogger(__name__)

# Matches rows with or without an explicit <tbody>
ROW_SELECTOR = "#main > div > div.findSection > table tr"
CELL_SELECTOR = "td"
PHOTO_SELECTOR = "a > img"
TEXT_LINK_SELECTOR = "a"


class ByTitleFind(SearchStrategy[FoundResults]):
    """Search titles through the quick find results table."""

    name = "by_title_find"

    def build_uri(self, base_url: str, query: str) -> str:
        """Build quick find URL."""
        return IMDBUrlBuilder.build_find_url(base_url, query)

    def parse_result(self, document: BeautifulSoup) -> FoundResults:
        """Parse result rows into FoundItem records.

        Each row holds a photo cell and a text cell. Rows where
        either cell, the image, its src or the title link is
        missing are skipped without error.

        Args:
            document: Parsed find page.

        Returns:
            Items in page order.
        """
        rows = find_all(document, ROW_SELECTOR)
        items = [item for item in map(self._parse_row, rows) if item is not None]

        logger.debug(f"Parsed {len(items)} found titles from {len(rows)} rows")
        return FoundResults(items=tuple(items))

    @staticmethod
    def _parse_row(row: Tag) -> FoundItem | None:
        """Parse a single result row.

        Args:
            row: Table row element.

        Returns:
            FoundItem, or None if the row does not have the expected shape.
        """
        cells = find_all(row, CELL_SELECTOR)[:2]
        if len(cells) < 2:
            return None
        photo_cell, text_cell = cells

        img = find_first(photo_cell, PHOTO_SELECTOR)
        if img is None:
            return None

        image_src = img.get("src")
        if image_src is None:
            return None

        link = find_first(text_cell, TEXT_LINK_SELECTOR)
        if link is None:
            return None

        anchor = parse_anchor(link)
        if anchor is None:
            return None

        return FoundItem(title=anchor.text, href=anchor.href, image_src=str(image_src))


def parse_find_results(html: str | bytes) -> FoundResults:
    """Parse a quick find page.

    Args:
        html: Page HTML.

    Returns:
        Items in page order.
    """
    return ByTitleFind().parse_result(parse_document(html))
