"""Search engine package."""

from imdb_search.engine.client import IMDBSearchEngine

__all__ = ["IMDBSearchEngine"]
