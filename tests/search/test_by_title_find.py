"""Unit tests for the quick find search."""

import pytest

from imdb_search.search.by_title_find import parse_find_results
from imdb_search.search.types import FoundItem, FoundResults

ROW_TEMPLATE = """
<div id="main"><div class="article"><div class="findSection">
<table class="findList">{rows}</table>
</div></div></div>
"""


def _page(rows: str) -> str:
    return ROW_TEMPLATE.format(rows=rows)


@pytest.mark.unit
class TestParseFindResults:
    @pytest.fixture
    def results(self, find_results_html: str) -> FoundResults:
        return parse_find_results(find_results_html)

    @staticmethod
    def test_only_well_formed_rows(results: FoundResults) -> None:
        assert len(results) == 3

    @staticmethod
    def test_fields_not_empty(results: FoundResults) -> None:
        for item in results:
            assert item.title
            assert item.href
            assert item.image_src

    @staticmethod
    def test_page_order(results: FoundResults) -> None:
        assert [item.title for item in results] == [
            "Starwars: Goretech",
            "StarWarsTFA Spoiler Review pt 12/12",
            "Star Wars",
        ]

    @staticmethod
    def test_first_item(results: FoundResults) -> None:
        first = results[0]
        assert first.href == "/title/tt9336300/?ref_=fn_tt_tt_1"
        assert first.image_src.endswith("_V1_UY44_CR2,0,32,44_AL_.jpg")
        assert first.title_id == "tt9336300"

    @staticmethod
    def test_text_cell_without_anchor_skipped() -> None:
        html = _page(
            '<tr><td class="primary_photo"><a href="/title/tt1/"><img src="https://img/1.jpg"></a></td>'
            '<td class="result_text"> Untitled Project (TV Series) </td></tr>'
        )
        assert len(parse_find_results(html)) == 0

    @staticmethod
    def test_rows_without_tbody() -> None:
        html = _page(
            '<tr><td><a href="/title/tt1/"><img src="https://img/1.jpg"></a></td>'
            '<td><a href="/title/tt1/">One</a></td></tr>'
        )
        assert list(parse_find_results(html)) == [
            FoundItem(title="One", href="/title/tt1/", image_src="https://img/1.jpg"),
        ]

    @staticmethod
    def test_text_anchor_without_href_skipped() -> None:
        html = _page(
            '<tr><td><a href="/title/tt1/"><img src="https://img/1.jpg"></a></td>'
            '<td><a name="tt">One</a></td></tr>'
        )
        assert len(parse_find_results(html)) == 0

    @staticmethod
    def test_empty_page() -> None:
        assert len(parse_find_results("<html></html>")) == 0


class TestFoundItemTitleId:
    @staticmethod
    def test_third_path_segment() -> None:
        item = FoundItem(title="Star Wars", href="/title/tt0076759/?ref_=fn_tt_tt_6", image_src="x")
        assert item.title_id == "tt0076759"

    @staticmethod
    def test_short_href_gives_empty_id() -> None:
        item = FoundItem(title="?", href="tt0076759", image_src="x")
        assert item.title_id == ""

    @staticmethod
    def test_unexpected_shape_not_validated() -> None:
        item = FoundItem(title="?", href="/name/nm0000184/", image_src="x")
        assert item.title_id == "nm0000184"
