"""Configuration module for the NewsAPI client."""

from newsapi_client.config.loader import get_api_key, load_config
from newsapi_client.config.models import DEFAULT_API_KEY_ENV, DEFAULT_BASE_URL, ClientConfig

__all__ = [
    "DEFAULT_API_KEY_ENV",
    "DEFAULT_BASE_URL",
    "ClientConfig",
    "get_api_key",
    "load_config",
]
