"""Exceptions raised by the IMDb search package."""


class IMDBSearchError(Exception):
    """Base exception for all imdb_search errors."""

    pass


class InvalidSelectorError(IMDBSearchError):
    """Raised when a CSS selector cannot be compiled."""

    pass


class MalformedPageError(IMDBSearchError):
    """Raised when a required element is missing from a result row."""

    pass


class DecodingError(IMDBSearchError):
    """Raised when a response body is not valid UTF-8 text."""

    pass


class IMDBClientError(IMDBSearchError):
    """Raised on HTTP errors while fetching a search page."""

    pass
