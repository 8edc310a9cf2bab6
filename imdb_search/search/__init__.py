"""IMDb search strategies and result records.

Classes:
    ByTitle: Advanced title listing search.
    ByTitleFind: Quick find search over titles.
    IMDBUrlBuilder: Search URL generation.

Usage:
    from imdb_search.search import parse_title_listing

    listing = parse_title_listing(html)
    for item in listing:
        print(item.title.text, [p.name for p in item.directors()])
"""

from imdb_search.search.base import SearchStrategy
from imdb_search.search.by_title import ByTitle, parse_people_block, parse_title_listing
from imdb_search.search.by_title_find import ByTitleFind, parse_find_results
from imdb_search.search.types import (
    NO_RATING,
    FoundItem,
    FoundResults,
    Person,
    TitleSearch,
    TitleSearchItem,
)
from imdb_search.search.url_builder import IMDBUrlBuilder

__all__ = [
    "NO_RATING",
    "ByTitle",
    "ByTitleFind",
    "FoundItem",
    "FoundResults",
    "IMDBUrlBuilder",
    "Person",
    "SearchStrategy",
    "TitleSearch",
    "TitleSearchItem",
    "parse_find_results",
    "parse_people_block",
    "parse_title_listing",
]
