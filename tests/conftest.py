"""Shared pytest fixtures."""

from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from imdb_search.helpers.traversal import parse_document

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True, scope="function")
def mock_env_for_tests(monkeypatch: pytest.MonkeyPatch) -> None:
    """Mock env variables for reproducible tests."""
    monkeypatch.setenv("IMDB_BASE_URL", "https://www.imdb.com")
    monkeypatch.setenv("IMDB_TIMEOUT", "5")
    monkeypatch.setenv("IMDB_MAX_RETRIES", "3")
    monkeypatch.setenv("IMDB_DEFAULT_START", "1")
    monkeypatch.setenv("IMDB_DEFAULT_COUNT", "10")

    monkeypatch.setenv("DEBUG", "false")
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.setenv("LOG_TO_FILE", "false")


@pytest.fixture
def title_listing_html() -> str:
    """Advanced search listing page: 3 valid rows, an ad and 2 broken rows."""
    return (FIXTURES_DIR / "title_listing.html").read_text(encoding="utf-8")


@pytest.fixture
def find_results_html() -> str:
    """Quick find page: 3 valid rows and 4 malformed rows."""
    return (FIXTURES_DIR / "find_results.html").read_text(encoding="utf-8")


def make_fragment(html: str) -> BeautifulSoup:
    """Parse an HTML snippet for helper tests."""
    return parse_document(html)


@pytest.fixture
def fragment():
    """Factory fixture parsing HTML snippets."""
    return make_fragment
