"""Title listing search (``/search/title/``).

Parses the advanced search listing into TitleSearchItem records,
including the role-keyed people credits of each row.
"""

import logging

from bs4 import BeautifulSoup, Tag

from imdb_search.exceptions import MalformedPageError
from imdb_search.helpers.anchor import parse_anchor
from imdb_search.helpers.traversal import find_all, find_first, inner_html, parse_document
from imdb_search.search.base import SearchStrategy
from imdb_search.search.types import NO_RATING, Person, TitleSearch, TitleSearchItem
from imdb_search.search.url_builder import IMDBUrlBuilder
from imdb_search.settings import settings

logger = logging.getLogger(__name__)

# Listing markup selectors
ROW_SELECTOR = "div.lister-list > div"
CONTENT_SELECTOR = "div.lister-item-content"
IMAGE_SELECTOR = "div.lister-item-image > a > img"
TITLE_SELECTOR = "h3.lister-item-header > a"
YEAR_SELECTOR = "h3.lister-item-header > span.lister-item-year"
TEXT_BLOCK_SELECTOR = "p"
RATING_SELECTOR = "div.ratings-bar > div.ratings-imdb-rating"

# Tokens between people names that carry no data
PEOPLE_SEPARATORS = frozenset({",", "|"})

MAX_COUNT = 255


class ByTitle(SearchStrategy[TitleSearch]):
    """Search titles through the advanced title listing.

    Attributes:
        start: 1-based offset of the first result.
        count: Number of results per page (1-255).
    """

    name = "by_title"

    def __init__(self, start: int | None = None, count: int | None = None) -> None:
        """Initialize strategy.

        Args:
            start: Result offset, defaults to settings.imdb.default_start.
            count: Page size, defaults to settings.imdb.default_count.

        Raises:
            ValueError: If start < 1 or count is outside 1-255.
        """
        start = settings.imdb.default_start if start is None else start
        count = settings.imdb.default_count if count is None else count

        if start < 1:
            raise ValueError(f"start must be >= 1, got {start}")
        if not 1 <= count <= MAX_COUNT:
            raise ValueError(f"count must be between 1 and {MAX_COUNT}, got {count}")

        self.start = start
        self.count = count

    def build_uri(self, base_url: str, query: str) -> str:
        """Build listing URL with start and count parameters."""
        return IMDBUrlBuilder.build_title_search_url(base_url, query, self.start, self.count)

    # -------------------------------------------------------------------------
    # Page Parsing
    # -------------------------------------------------------------------------

    def parse_result(self, document: BeautifulSoup) -> TitleSearch:
        """Parse every listing row into a TitleSearchItem.

        Rows without an item content block (ads, separators) and
        rows missing a required element are skipped.

        Args:
            document: Parsed listing page.

        Returns:
            Items in page order.
        """
        rows = find_all(document, ROW_SELECTOR)
        items: list[TitleSearchItem] = []

        for row in rows:
            try:
                item = self._parse_row(row)
            except MalformedPageError:
                item = None

            if item is not None:
                items.append(item)

        logger.debug(f"Parsed {len(items)} titles from {len(rows)} rows")
        return TitleSearch(items=tuple(items))

    def _parse_row(self, row: Tag) -> TitleSearchItem | None:
        """Parse a single listing row.

        Args:
            row: Row element.

        Returns:
            Parsed item, or None for rows without item content.

        Raises:
            MalformedPageError: If the title or text blocks are missing.
        """
        contents = find_first(row, CONTENT_SELECTOR)
        if contents is None:
            return None

        title_ele = find_first(contents, TITLE_SELECTOR)
        if title_ele is None:
            raise MalformedPageError("Listing row has no title anchor")

        title = parse_anchor(title_ele)
        if title is None or not title.text or not title.href:
            raise MalformedPageError("Listing row title has no text or link")

        blocks = find_all(contents, TEXT_BLOCK_SELECTOR)
        if len(blocks) < 2:
            raise MalformedPageError("Listing row has no info or summary block")

        # Blocks are positional: info, summary, then people credits
        info_ele, summary_ele = blocks[0], blocks[1]
        people = parse_people_block(blocks[2]) if len(blocks) > 2 else {}

        return TitleSearchItem(
            title=title,
            image_url=self._parse_image_url(row),
            years=self._parse_years(contents),
            info=self._parse_info(info_ele),
            rating=self._parse_rating(contents),
            summary=inner_html(summary_ele).strip(),
            people_by_role=people,
        )

    @staticmethod
    def _parse_image_url(row: Tag) -> str:
        img = find_first(row, IMAGE_SELECTOR)
        if img is None:
            return ""
        return str(img.get("src", ""))

    @staticmethod
    def _parse_years(contents: Tag) -> str:
        year_ele = find_first(contents, YEAR_SELECTOR)
        return inner_html(year_ele) if year_ele is not None else ""

    @staticmethod
    def _parse_info(info_ele: Tag) -> str:
        """Join the text of every span in the info block."""
        spans = find_all(info_ele, "span")
        return " ".join(span.get_text().strip() for span in spans)

    @staticmethod
    def _parse_rating(contents: Tag) -> str:
        """Read the rating bar value, or the NO_RATING sentinel."""
        rating_ele = find_first(contents, RATING_SELECTOR)
        if rating_ele is None:
            return NO_RATING

        value = rating_ele.get("data-value")
        return str(value) if value else NO_RATING


# =============================================================================
# PEOPLE CREDITS
# =============================================================================


def parse_people_block(block: Tag) -> dict[str, tuple[Person, ...]]:
    """Recover the role -> people mapping of a credits block.

    Role labels, separators and names are sibling nodes with no
    per-person wrapper, so the block is read in two passes: the
    text nodes give ordered names per role, the anchors give each
    name's link. The passes are joined on the exact name text.

    Example:
        ``Director: <a href="/name/nm1/">Alice</a> | Stars: <a ...>Bob</a>``
        gives ``{"Director": (Alice,), "Stars": (Bob,)}``.

    Names without a matching anchor are dropped, as are roles
    left with nobody.

    Args:
        block: Credits ``<p>`` element.

    Returns:
        Role label to people, in page order.
    """
    names_by_role = _collect_names_by_role(block)
    links = _collect_links(block)

    people_by_role: dict[str, tuple[Person, ...]] = {}
    for role, names in names_by_role.items():
        people = tuple(
            Person(name=name, profile_href=links[name], role=role)
            for name in names
            if name in links
        )
        if people:
            people_by_role[role] = people

    return people_by_role


def _collect_names_by_role(block: Tag) -> dict[str, list[str]]:
    """Walk text nodes, grouping names under the preceding role label."""
    names_by_role: dict[str, list[str]] = {}
    current_role: str | None = None

    for token in block.stripped_strings:
        if token.endswith(":"):
            current_role = token[:-1].strip()
            names_by_role.setdefault(current_role, [])
        elif token in PEOPLE_SEPARATORS:
            continue
        elif current_role is not None:
            names_by_role[current_role].append(token)

    return names_by_role


def _collect_links(block: Tag) -> dict[str, str]:
    """Map each anchor's display text to its href."""
    links: dict[str, str] = {}
    for a_ele in find_all(block, "a"):
        anchor = parse_anchor(a_ele)
        if anchor is not None:
            links[a_ele.get_text().strip()] = anchor.href
    return links


def parse_title_listing(html: str | bytes) -> TitleSearch:
    """Parse a title listing page with default strategy parameters.

    Args:
        html: Page HTML.

    Returns:
        Items in page order.
    """
    return ByTitle().parse_result(parse_document(html))
