"""Data source settings."""

from imdb_search.settings.sources.imdb import IMDBSettings

__all__ = ["IMDBSettings"]
