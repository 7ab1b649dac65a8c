"""Tests for enum codecs."""

import pytest

from newsapi_client.data import (
    NewsCategory,
    SearchIn,
    SortBy,
    encode,
    parse_category,
    parse_search_in,
    parse_sort_by,
)
from newsapi_client.errors import ValidationError


class TestParseCategory:
    """Tests for parse_category."""

    @pytest.mark.parametrize("text", ["business", "BUSINESS", "Business"])
    def test_case_insensitive(self, text: str) -> None:
        assert parse_category(text) is NewsCategory.BUSINESS

    def test_all_categories(self) -> None:
        for category in NewsCategory:
            assert parse_category(category.value) is category

    @pytest.mark.parametrize("text", ["invalid", "tech", ""])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(ValidationError, match="Invalid category"):
            parse_category(text)

    def test_error_lists_valid_options(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            parse_category("tech")
        assert str(exc_info.value) == (
            "Invalid category: tech. Valid options: business, entertainment, "
            "general, health, science, sports, technology"
        )


class TestParseSortBy:
    """Tests for parse_sort_by."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("relevancy", SortBy.RELEVANCY),
            ("RELEVANCY", SortBy.RELEVANCY),
            ("Relevancy", SortBy.RELEVANCY),
            ("popularity", SortBy.POPULARITY),
            ("publishedAt", SortBy.PUBLISHED_AT),
            ("publishedat", SortBy.PUBLISHED_AT),
            ("published-at", SortBy.PUBLISHED_AT),
            ("PUBLISHED-AT", SortBy.PUBLISHED_AT),
        ],
    )
    def test_valid(self, text: str, expected: SortBy) -> None:
        assert parse_sort_by(text) is expected

    @pytest.mark.parametrize("text", ["invalid", "date", ""])
    def test_invalid(self, text: str) -> None:
        expected = "Valid options: relevancy, popularity, publishedAt"
        with pytest.raises(ValidationError, match=expected):
            parse_sort_by(text)


class TestParseSearchIn:
    """Tests for parse_search_in."""

    def test_single_values(self) -> None:
        assert parse_search_in("title") == [SearchIn.TITLE]
        assert parse_search_in("description") == [SearchIn.DESCRIPTION]
        assert parse_search_in("content") == [SearchIn.CONTENT]

    def test_multiple_values_keep_order(self) -> None:
        assert parse_search_in("content,title") == [SearchIn.CONTENT, SearchIn.TITLE]

    def test_case_insensitive(self) -> None:
        assert parse_search_in("TITLE,Description,CONTENT") == list(SearchIn)

    def test_whitespace_is_stripped(self) -> None:
        assert parse_search_in(" title , description , content ") == list(SearchIn)

    @pytest.mark.parametrize("text", ["invalid", "title,invalid,description", ""])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(ValidationError, match="Invalid search-in value"):
            parse_search_in(text)


def test_encode_returns_wire_token() -> None:
    assert encode(SortBy.PUBLISHED_AT) == "publishedAt"
    assert encode(NewsCategory.TECHNOLOGY) == "technology"
    assert encode(SearchIn.CONTENT) == "content"
    assert encode("publishedAt") == "publishedAt"


def test_validation_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        parse_category("nope")
