"""NewsAPI Client: typed requests, validated query strings and a CLI for newsapi.org."""

from newsapi_client.client import NewsAPIClient, deserialize
from newsapi_client.config import ClientConfig, get_api_key, load_config
from newsapi_client.data import (
    Article,
    ArticleSource,
    ArticlesResponse,
    ErrorCode,
    ErrorResponse,
    EverythingRequest,
    HeadlinesRequest,
    NewsCategory,
    SearchIn,
    SortBy,
    Source,
    SourcesRequest,
    SourcesResponse,
    encode,
    parse_category,
    parse_search_in,
    parse_sort_by,
)
from newsapi_client.errors import (
    ConfigurationError,
    NewsAPIError,
    ResponseError,
    TransportError,
    UpstreamError,
    ValidationError,
)
from newsapi_client.query import (
    to_query_params,
    validate_and_format_date,
    validate_date,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Requests
    "EverythingRequest",
    "HeadlinesRequest",
    "SourcesRequest",
    # Responses
    "Article",
    "ArticleSource",
    "ArticlesResponse",
    "ErrorResponse",
    "Source",
    "SourcesResponse",
    # Enums
    "ErrorCode",
    "NewsCategory",
    "SearchIn",
    "SortBy",
    # Functions
    "deserialize",
    "encode",
    "parse_category",
    "parse_search_in",
    "parse_sort_by",
    "to_query_params",
    "validate_and_format_date",
    "validate_date",
    # Errors
    "ConfigurationError",
    "NewsAPIError",
    "ResponseError",
    "TransportError",
    "UpstreamError",
    "ValidationError",
    # Client
    "NewsAPIClient",
    # Config
    "ClientConfig",
    "get_api_key",
    "load_config",
]
