"""Tests for query parameter serialization."""

import pytest

from newsapi_client.data import (
    EverythingRequest,
    HeadlinesRequest,
    NewsCategory,
    SearchIn,
    SortBy,
    SourcesRequest,
)
from newsapi_client.errors import ValidationError
from newsapi_client.query import to_query_params


class TestHeadlinesRequest:
    """Tests for serializing HeadlinesRequest."""

    def test_basic_fields_in_declaration_order(self) -> None:
        req = HeadlinesRequest(
            api_key="test-key-123",
            country="us",
            category=NewsCategory.TECHNOLOGY,
        )
        assert to_query_params(req) == [
            ("apiKey", "test-key-123"),
            ("country", "us"),
            ("category", "technology"),
            ("pageSize", "20"),
            ("page", "1"),
        ]

    def test_sources_are_comma_joined(self) -> None:
        req = HeadlinesRequest(
            api_key="test-key",
            country="us",
            category=NewsCategory.BUSINESS,
            sources=("bbc-news", "cnn"),
            page_size=10,
            page=2,
        )
        params = to_query_params(req)
        assert ("sources", "bbc-news,cnn") in params
        assert ("pageSize", "10") in params
        assert ("page", "2") in params

    def test_empty_sources_are_omitted(self) -> None:
        req = HeadlinesRequest(api_key="key", country="fr", category=NewsCategory.SCIENCE)
        params = to_query_params(req)
        assert "sources" not in dict(params)
        assert len(params) == 5

    def test_zero_integers_are_omitted(self) -> None:
        req = HeadlinesRequest(api_key="key", country="us", page_size=0, page=0)
        names = [name for name, _ in to_query_params(req)]
        assert names == ["apiKey", "country", "category"]

    def test_empty_api_key_is_omitted(self) -> None:
        req = HeadlinesRequest(api_key="", country="us")
        assert "apiKey" not in dict(to_query_params(req))

    def test_plain_string_category_is_sent(self) -> None:
        req = HeadlinesRequest(api_key="k", country="us", category="technology")
        assert ("category", "technology") in to_query_params(req)


class TestSourcesRequest:
    """Tests for serializing SourcesRequest."""

    def test_all_fields(self) -> None:
        req = SourcesRequest(
            api_key="api-key-xyz",
            category=NewsCategory.HEALTH,
            language="en",
            country="gb",
        )
        assert to_query_params(req) == [
            ("apiKey", "api-key-xyz"),
            ("category", "health"),
            ("language", "en"),
            ("country", "gb"),
        ]

    def test_empty_strings_are_omitted(self) -> None:
        req = SourcesRequest(api_key="test")
        assert to_query_params(req) == [("apiKey", "test"), ("category", "general")]


class TestEverythingRequest:
    """Tests for serializing EverythingRequest."""

    def test_all_fields(self) -> None:
        req = EverythingRequest(
            api_key="my-api-key",
            q="bitcoin",
            search_in=(SearchIn.TITLE, SearchIn.DESCRIPTION),
            sources=("techcrunch", "wired"),
            domains=("example.com",),
            exclude_domains=("spam.com",),
            from_date="2024-01-01",
            to_date="2024-01-31",
            language="en",
            sort_by=SortBy.POPULARITY,
            page_size=50,
            page=3,
        )
        assert to_query_params(req) == [
            ("apiKey", "my-api-key"),
            ("q", "bitcoin"),
            ("searchIn", "title,description"),
            ("sources", "techcrunch,wired"),
            ("domains", "example.com"),
            ("excludeDomains", "spam.com"),
            ("from", "2024-01-01"),
            ("to", "2024-01-31"),
            ("language", "en"),
            ("sortBy", "popularity"),
            ("pageSize", "50"),
            ("page", "3"),
        ]

    def test_query_only(self) -> None:
        req = EverythingRequest(api_key="key", q="bitcoin")
        assert to_query_params(req) == [
            ("apiKey", "key"),
            ("q", "bitcoin"),
            ("pageSize", "100"),
            ("page", "1"),
        ]

    def test_datetime_strings(self) -> None:
        req = EverythingRequest(
            api_key="my-api-key",
            q="test",
            from_date="2024-01-01T00:00:00Z",
            to_date="2024-01-31T23:59:59+02:00",
        )
        params = dict(to_query_params(req))
        assert params["from"] == "2024-01-01T00:00:00Z"
        assert params["to"] == "2024-01-31T23:59:59+02:00"

    def test_sort_by_published_at_uses_camel_case(self) -> None:
        req = EverythingRequest(api_key="key", q="test", sort_by=SortBy.PUBLISHED_AT)
        assert ("sortBy", "publishedAt") in to_query_params(req)

    def test_plain_string_enums_are_sent(self) -> None:
        req = EverythingRequest(
            api_key="key",
            q="test",
            search_in=("title", SearchIn.CONTENT),
            sort_by="relevancy",
        )
        params = dict(to_query_params(req))
        assert params["searchIn"] == "title,content"
        assert params["sortBy"] == "relevancy"

    def test_search_in_keeps_original_order(self) -> None:
        req = EverythingRequest(
            api_key="key",
            q="test",
            search_in=(SearchIn.CONTENT, SearchIn.TITLE),
        )
        assert ("searchIn", "content,title") in to_query_params(req)

    def test_invalid_date_raises(self) -> None:
        req = EverythingRequest(api_key="key", q="test", from_date="invalid-date")
        with pytest.raises(ValidationError, match="'from'"):
            to_query_params(req)

    def test_invalid_datetime_raises(self) -> None:
        req = EverythingRequest(
            api_key="key",
            q="test",
            from_date="2024-01-01",
            to_date="2024-01-01T25:00:00Z",
        )
        with pytest.raises(ValidationError, match="'to'"):
            to_query_params(req)

    def test_from_after_to_is_not_checked(self) -> None:
        req = EverythingRequest(api_key="key", q="t", from_date="2024-02-01", to_date="2024-01-01")
        params = dict(to_query_params(req))
        assert params["from"] == "2024-02-01"
        assert params["to"] == "2024-01-01"


def _reparse(params: list[tuple[str, str]]) -> dict[str, str]:
    return dict(params)


def test_round_trip_recovers_set_fields() -> None:
    """Every non-empty field set on the request shows up once, encoded."""
    req = EverythingRequest(
        api_key="key",
        q="climate",
        domains=("a.com", "b.org"),
        language="de",
        page=2,
    )
    parsed = _reparse(to_query_params(req))
    assert parsed == {
        "apiKey": "key",
        "q": "climate",
        "domains": "a.com,b.org",
        "language": "de",
        "pageSize": "100",
        "page": "2",
    }
    assert parsed["domains"].split(",") == list(req.domains)
