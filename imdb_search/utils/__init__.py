"""Utilities package: logging setup."""

from imdb_search.utils.logger import setup_logger

__all__ = ["setup_logger"]
