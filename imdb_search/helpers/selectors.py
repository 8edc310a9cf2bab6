"""CSS selector compilation.

Thin adapter over soupsieve, the selector engine behind
BeautifulSoup's ``select`` API.
"""

from functools import lru_cache

import soupsieve
from soupsieve import SoupSieve

from imdb_search.exceptions import InvalidSelectorError

SelectorHandle = SoupSieve


@lru_cache(maxsize=256)
def compile_selector(selector: str) -> SelectorHandle:
    """Compile a CSS selector into a reusable handle.

    Handles are cached by selector text, so rows of a large
    result page share one compiled selector.

    Args:
        selector: CSS selector text.

    Returns:
        Compiled selector handle.

    Raises:
        InvalidSelectorError: If the selector syntax is invalid.
    """
    try:
        return soupsieve.compile(selector)
    except soupsieve.SelectorSyntaxError as e:
        raise InvalidSelectorError(f"Invalid selector {selector!r}: {e}") from e
