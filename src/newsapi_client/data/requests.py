"""Typed request descriptions for the three API endpoints.

Each request declares ``QUERY_FIELDS``: an ordered table mapping attributes
to wire parameter names and encoding kinds. The table order is the order of
the serialized query string.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from newsapi_client.data.enums import NewsCategory, SearchIn, SortBy


class ParamKind(Enum):
    """How a request attribute is encoded into a query parameter."""

    STRING = "string"
    INTEGER = "integer"
    ENUM = "enum"
    STRING_LIST = "string_list"
    ENUM_LIST = "enum_list"


@dataclass(frozen=True)
class QueryField:
    """Descriptor binding a request attribute to a query parameter."""

    param: str
    attr: str
    kind: ParamKind


_LIST_KINDS = frozenset({ParamKind.STRING_LIST, ParamKind.ENUM_LIST})


class _QueryRequest:
    """Shared checks for request dataclasses."""

    QUERY_FIELDS: ClassVar[tuple[QueryField, ...]] = ()

    def __post_init__(self) -> None:
        # list slots must not hold a bare str
        for field in self.QUERY_FIELDS:
            if field.kind in _LIST_KINDS and isinstance(getattr(self, field.attr), str):
                msg = f"{field.attr} must be a sequence of values, not a single string"
                raise TypeError(msg)


@dataclass(frozen=True)
class HeadlinesRequest(_QueryRequest):
    """Query for ``/top-headlines``.

    The API needs either ``country`` or ``sources``; callers enforce that.
    """

    api_key: str
    country: str = ""
    category: NewsCategory = NewsCategory.GENERAL
    sources: tuple[str, ...] = ()
    page_size: int = 20
    page: int = 1

    QUERY_FIELDS: ClassVar[tuple[QueryField, ...]] = (
        QueryField("apiKey", "api_key", ParamKind.STRING),
        QueryField("country", "country", ParamKind.STRING),
        QueryField("category", "category", ParamKind.ENUM),
        QueryField("sources", "sources", ParamKind.STRING_LIST),
        QueryField("pageSize", "page_size", ParamKind.INTEGER),
        QueryField("page", "page", ParamKind.INTEGER),
    )


@dataclass(frozen=True)
class SourcesRequest(_QueryRequest):
    """Query for ``/sources``. All filters are optional."""

    api_key: str
    category: NewsCategory = NewsCategory.GENERAL
    language: str = ""
    country: str = ""

    QUERY_FIELDS: ClassVar[tuple[QueryField, ...]] = (
        QueryField("apiKey", "api_key", ParamKind.STRING),
        QueryField("category", "category", ParamKind.ENUM),
        QueryField("language", "language", ParamKind.STRING),
        QueryField("country", "country", ParamKind.STRING),
    )


@dataclass(frozen=True)
class EverythingRequest(_QueryRequest):
    """Query for ``/everything``.

    ``q`` is mandatory for the API; callers enforce that. ``from_date`` and
    ``to_date`` take ``YYYY-MM-DD`` or ISO 8601 date-times and are validated
    when serialized. ``sort_by=None`` leaves ordering to the server
    (publishedAt).
    """

    api_key: str
    q: str
    search_in: tuple[SearchIn, ...] = ()
    sources: tuple[str, ...] = ()
    domains: tuple[str, ...] = ()
    exclude_domains: tuple[str, ...] = ()
    from_date: str = ""
    to_date: str = ""
    language: str = ""
    sort_by: SortBy | None = None
    page_size: int = 100
    page: int = 1

    QUERY_FIELDS: ClassVar[tuple[QueryField, ...]] = (
        QueryField("apiKey", "api_key", ParamKind.STRING),
        QueryField("q", "q", ParamKind.STRING),
        QueryField("searchIn", "search_in", ParamKind.ENUM_LIST),
        QueryField("sources", "sources", ParamKind.STRING_LIST),
        QueryField("domains", "domains", ParamKind.STRING_LIST),
        QueryField("excludeDomains", "exclude_domains", ParamKind.STRING_LIST),
        QueryField("from", "from_date", ParamKind.STRING),
        QueryField("to", "to_date", ParamKind.STRING),
        QueryField("language", "language", ParamKind.STRING),
        QueryField("sortBy", "sort_by", ParamKind.ENUM),
        QueryField("pageSize", "page_size", ParamKind.INTEGER),
        QueryField("page", "page", ParamKind.INTEGER),
    )


NewsRequest = HeadlinesRequest | SourcesRequest | EverythingRequest
