"""HTTP client and response deserialization."""

from newsapi_client.client.deserialize import deserialize, upstream_error
from newsapi_client.client.newsapi import NewsAPIClient

__all__ = [
    "NewsAPIClient",
    "deserialize",
    "upstream_error",
]
