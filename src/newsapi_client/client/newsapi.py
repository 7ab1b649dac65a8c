"""Async client for the NewsAPI v2 REST endpoints."""

import logging
from urllib.parse import urlencode

import httpx

from newsapi_client.client.deserialize import ResponseT, deserialize, upstream_error
from newsapi_client.config.models import ClientConfig
from newsapi_client.data.requests import (
    EverythingRequest,
    HeadlinesRequest,
    NewsRequest,
    SourcesRequest,
)
from newsapi_client.data.responses import ArticlesResponse, NewsResponse, SourcesResponse
from newsapi_client.errors import ConfigurationError, TransportError
from newsapi_client.query.params import to_query_params

logger = logging.getLogger(__name__)

_ENDPOINTS: dict[type, tuple[str, type[ArticlesResponse] | type[SourcesResponse]]] = {
    HeadlinesRequest: ("/top-headlines", ArticlesResponse),
    SourcesRequest: ("/sources", SourcesResponse),
    EverythingRequest: ("/everything", ArticlesResponse),
}


def _redact(params: list[tuple[str, str]]) -> list[tuple[str, str]]:
    return [(name, "***" if name == "apiKey" else value) for name, value in params]


class NewsAPIClient:
    """Issue one GET per call against the NewsAPI endpoints.

    The endpoint and the expected response shape are picked from the
    request type: headlines and everything return ``ArticlesResponse``,
    sources returns ``SourcesResponse``.

    Args:
        config: Client configuration (defaults to ``ClientConfig()``).
    """

    def __init__(self, config: ClientConfig | None = None) -> None:
        self._config = config or ClientConfig()

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def pull(self, request: NewsRequest) -> NewsResponse:
        """Send ``request`` and deserialize the body into its response model.

        Raises:
            ValidationError: If a request field fails validation.
            ConfigurationError: If the configured base URL is not a valid URL.
            TransportError: On connection failure or an unexpected HTTP status.
            UpstreamError: If the API returns an error response.
            ResponseError: If the body cannot be parsed into the expected model.
        """
        endpoint, shape = _endpoint_for(request)
        return await self._pull(endpoint, shape, request)

    async def pull_raw(self, request: NewsRequest) -> str:
        """Send ``request`` and return the response body unparsed."""
        endpoint, _shape = _endpoint_for(request)
        return await self._get(endpoint, to_query_params(request))

    async def top_headlines(self, request: HeadlinesRequest) -> ArticlesResponse:
        return await self._pull("/top-headlines", ArticlesResponse, request)

    async def sources(self, request: SourcesRequest) -> SourcesResponse:
        return await self._pull("/sources", SourcesResponse, request)

    async def everything(self, request: EverythingRequest) -> ArticlesResponse:
        return await self._pull("/everything", ArticlesResponse, request)

    async def _pull(
        self,
        endpoint: str,
        shape: type[ResponseT],
        request: NewsRequest,
    ) -> ResponseT:
        raw = await self._get(endpoint, to_query_params(request))
        return deserialize(raw, shape)

    async def _get(self, endpoint: str, params: list[tuple[str, str]]) -> str:
        """Perform the GET and return the body of a successful response."""
        url = f"{self._config.base_url}{endpoint}"
        logger.debug("Requesting: %s?%s", url, urlencode(_redact(params)))

        try:
            async with httpx.AsyncClient(
                timeout=self._config.timeout,
                verify=self._config.verify_ssl,
            ) as client:
                response = await client.get(url, params=params)
        except httpx.InvalidURL as e:
            msg = f"Invalid request URL {url}: {e}"
            raise ConfigurationError(msg) from e
        except httpx.HTTPError as e:
            msg = f"Connection error: {e}"
            raise TransportError(msg) from e

        logger.debug("Response status: %d", response.status_code)
        if not response.is_success:
            try:
                data = response.json()
            except ValueError:
                data = None
            error = upstream_error(data, status_code=response.status_code)
            if error is not None:
                raise error
            msg = (
                f"Error pulling data from {url}: "
                f"{response.status_code} {response.reason_phrase}"
            )
            raise TransportError(msg)

        return response.text


def _endpoint_for(
    request: NewsRequest,
) -> tuple[str, type[ArticlesResponse] | type[SourcesResponse]]:
    try:
        return _ENDPOINTS[type(request)]
    except KeyError:
        msg = f"Unknown request type: {type(request).__name__}"
        raise TypeError(msg) from None
