"""Unit tests for the IMDb search engine."""

import httpx
import pytest

from imdb_search.engine.client import IMDBSearchEngine
from imdb_search.exceptions import DecodingError, IMDBClientError
from imdb_search.search.by_title import ByTitle


def _transport(body: bytes | str, status_code: int = 200, seen: list[httpx.Request] | None = None):
    """Mock transport returning a fixed body and recording requests."""

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(status_code, content=body)

    return httpx.MockTransport(handler)


class TestSearchTitles:
    @staticmethod
    def test_fetches_and_parses_listing(title_listing_html: str) -> None:
        seen: list[httpx.Request] = []
        with IMDBSearchEngine(transport=_transport(title_listing_html, seen=seen)) as engine:
            listing = engine.search_titles("star wars", start=21, count=50)

        assert len(listing) == 3
        assert str(seen[0].url) == "https://www.imdb.com/search/title/?title=star%20wars&start=21&count=50"

    @staticmethod
    def test_sends_user_agent(title_listing_html: str) -> None:
        seen: list[httpx.Request] = []
        with IMDBSearchEngine(transport=_transport(title_listing_html, seen=seen)) as engine:
            engine.search_titles("alien")

        assert seen[0].headers["User-Agent"]

    @staticmethod
    def test_custom_base_uri(title_listing_html: str) -> None:
        seen: list[httpx.Request] = []
        transport = _transport(title_listing_html, seen=seen)
        with IMDBSearchEngine(base_uri="https://m.imdb.com", transport=transport) as engine:
            engine.search_by(ByTitle(), "alien")

        assert engine.base_uri == "https://m.imdb.com"
        assert seen[0].url.host == "m.imdb.com"


class TestFindTitles:
    @staticmethod
    def test_fetches_and_parses_find(find_results_html: str) -> None:
        seen: list[httpx.Request] = []
        with IMDBSearchEngine(transport=_transport(find_results_html, seen=seen)) as engine:
            results = engine.find_titles("starwars")

        assert [item.title_id for item in results] == ["tt9336300", "tt10763556", "tt0076759"]
        assert str(seen[0].url) == "https://www.imdb.com/find?s=tt&q=starwars"


class TestErrors:
    @staticmethod
    def test_http_error_status_raises() -> None:
        with IMDBSearchEngine(transport=_transport("Not found", status_code=404)) as engine:
            with pytest.raises(IMDBClientError):
                engine.find_titles("nothing")

    @staticmethod
    def test_invalid_body_raises_decoding_error() -> None:
        with IMDBSearchEngine(transport=_transport(b"<html>\xff\xfe</html>")) as engine:
            with pytest.raises(DecodingError):
                engine.find_titles("broken")

    @staticmethod
    def test_requires_context_manager() -> None:
        engine = IMDBSearchEngine(transport=_transport(""))
        with pytest.raises(IMDBClientError):
            engine.find_titles("alien")

    @staticmethod
    def test_timeouts_retried_then_raised(monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("tenacity.nap.time.sleep", lambda _: None)
        attempts: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            attempts.append(request)
            raise httpx.ReadTimeout("timed out", request=request)

        with IMDBSearchEngine(transport=httpx.MockTransport(handler)) as engine:
            with pytest.raises(IMDBClientError):
                engine.find_titles("slow")

        assert len(attempts) == 3

    @staticmethod
    def test_client_closed_on_exit() -> None:
        engine = IMDBSearchEngine(transport=_transport(""))
        with engine:
            pass
        with pytest.raises(IMDBClientError):
            engine.find_titles("alien")
