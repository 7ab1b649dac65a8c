"""Pydantic configuration models for the NewsAPI client."""

from pydantic import BaseModel

DEFAULT_BASE_URL = "https://newsapi.org/v2"
DEFAULT_API_KEY_ENV = "NEWSAPI_KEY"


class ClientConfig(BaseModel):
    """Configuration for NewsAPIClient.

    TLS certificate verification is off by default for compatibility with
    intercepting proxies; set ``verify_ssl: true`` to enable it.
    """

    base_url: str = DEFAULT_BASE_URL
    timeout: float | None = 30.0
    verify_ssl: bool = False
    api_key_env: str = DEFAULT_API_KEY_ENV

    model_config = {"frozen": True}
