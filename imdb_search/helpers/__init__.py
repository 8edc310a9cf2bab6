"""HTML helpers: selectors, traversal and anchor parsing."""

from imdb_search.helpers.anchor import Anchor, parse_anchor, resolve_absolute
from imdb_search.helpers.selectors import SelectorHandle, compile_selector
from imdb_search.helpers.traversal import (
    find_all,
    find_first,
    inner_html,
    parse_document,
)

__all__ = [
    "Anchor",
    "SelectorHandle",
    "compile_selector",
    "find_all",
    "find_first",
    "inner_html",
    "parse_anchor",
    "parse_document",
    "resolve_absolute",
]
