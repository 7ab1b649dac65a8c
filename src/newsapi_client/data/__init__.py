"""Request, response and enum models for the NewsAPI client."""

from newsapi_client.data.enums import (
    ErrorCode,
    NewsCategory,
    SearchIn,
    SortBy,
    encode,
    parse_category,
    parse_search_in,
    parse_sort_by,
)
from newsapi_client.data.requests import (
    EverythingRequest,
    HeadlinesRequest,
    NewsRequest,
    ParamKind,
    QueryField,
    SourcesRequest,
)
from newsapi_client.data.responses import (
    Article,
    ArticleSource,
    ArticlesResponse,
    ErrorResponse,
    NewsResponse,
    Source,
    SourcesResponse,
)

__all__ = [
    "Article",
    "ArticleSource",
    "ArticlesResponse",
    "ErrorCode",
    "ErrorResponse",
    "EverythingRequest",
    "HeadlinesRequest",
    "NewsCategory",
    "NewsRequest",
    "NewsResponse",
    "ParamKind",
    "QueryField",
    "SearchIn",
    "SortBy",
    "Source",
    "SourcesRequest",
    "SourcesResponse",
    "encode",
    "parse_category",
    "parse_search_in",
    "parse_sort_by",
]
