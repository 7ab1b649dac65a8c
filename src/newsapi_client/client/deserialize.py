"""Mapping of raw response bodies onto typed response models."""

import json
from typing import Any, TypeVar

import pydantic

from newsapi_client.data.responses import ArticlesResponse, SourcesResponse
from newsapi_client.errors import ResponseError, UpstreamError

ResponseT = TypeVar("ResponseT", ArticlesResponse, SourcesResponse)


def upstream_error(data: Any, *, status_code: int | None = None) -> UpstreamError | None:
    """Build an UpstreamError from a decoded ``status == "error"`` body.

    Returns None when ``data`` is not an error shape.
    """
    if not isinstance(data, dict) or data.get("status") != "error":
        return None
    code = data.get("code") or "unknown"
    message = data.get("message") or "An error occurred"
    return UpstreamError(str(code), str(message), status_code=status_code)


def deserialize(raw: str, shape: type[ResponseT]) -> ResponseT:
    """Parse a response body into the shape the calling endpoint returns.

    The shape is chosen by the caller; the body is never sniffed for it.

    Raises:
        UpstreamError: If the body is an API error response.
        ResponseError: If the body is not JSON or does not fit ``shape``.
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        msg = f"Failed to parse response: {e}"
        raise ResponseError(msg) from e

    error = upstream_error(data)
    if error is not None:
        raise error

    try:
        return shape.model_validate(data)
    except pydantic.ValidationError as e:
        msg = f"Failed to parse response: {e}"
        raise ResponseError(msg) from e
