"""Search IMDb and extract structured title records from result pages.

Usage:
    from imdb_search import IMDBSearchEngine

    with IMDBSearchEngine() as engine:
        for item in engine.search_titles("alien"):
            print(item.title.text, item.rating)
"""

from imdb_search.engine import IMDBSearchEngine
from imdb_search.exceptions import (
    DecodingError,
    IMDBClientError,
    IMDBSearchError,
    InvalidSelectorError,
    MalformedPageError,
)
from imdb_search.helpers import Anchor
from imdb_search.search import (
    ByTitle,
    ByTitleFind,
    FoundItem,
    FoundResults,
    Person,
    TitleSearch,
    TitleSearchItem,
    parse_find_results,
    parse_title_listing,
)

__all__ = [
    "Anchor",
    "ByTitle",
    "ByTitleFind",
    "DecodingError",
    "FoundItem",
    "FoundResults",
    "IMDBClientError",
    "IMDBSearchEngine",
    "IMDBSearchError",
    "InvalidSelectorError",
    "MalformedPageError",
    "Person",
    "TitleSearch",
    "TitleSearchItem",
    "parse_find_results",
    "parse_title_listing",
]
