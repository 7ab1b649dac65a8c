"""Serialization of request models into ordered query parameters."""

from typing import Any

from newsapi_client.data.enums import encode
from newsapi_client.data.requests import NewsRequest, ParamKind
from newsapi_client.query.dates import validate_date

_DATE_PARAMS = frozenset({"from", "to"})


def _encode_value(kind: ParamKind, param: str, value: Any) -> str | None:
    """Encode one attribute, or return None when it should be left out."""
    if kind is ParamKind.STRING:
        if not value:
            return None
        if param in _DATE_PARAMS:
            validate_date(value, param)
        return value
    if kind is ParamKind.INTEGER:
        # 0 means "use the server default"
        return str(value) if value > 0 else None
    if kind is ParamKind.ENUM:
        return None if value is None else encode(value)
    if kind is ParamKind.STRING_LIST:
        return ",".join(value) if value else None
    if kind is ParamKind.ENUM_LIST:
        return ",".join(encode(item) for item in value) if value else None
    msg = f"Unknown parameter kind: {kind}"
    raise ValueError(msg)


def to_query_params(request: NewsRequest) -> list[tuple[str, str]]:
    """Convert a request into ``(name, value)`` pairs in declaration order.

    Rules per kind:

    - strings are included when non-empty; ``from``/``to`` are validated first.
    - integers are included when strictly positive.
    - enums are always included (an unset optional enum is skipped).
    - lists are included when non-empty, comma-joined in original order.

    Raises:
        ValidationError: If a ``from``/``to`` value is not a valid date.
    """
    params: list[tuple[str, str]] = []
    for field in request.QUERY_FIELDS:
        encoded = _encode_value(field.kind, field.param, getattr(request, field.attr))
        if encoded is not None:
            params.append((field.param, encoded))
    return params
