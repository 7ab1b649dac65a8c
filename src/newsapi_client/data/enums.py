"""Domain enumerations and their wire-string codecs."""

from enum import StrEnum
from typing import TypeVar

from newsapi_client.errors import ValidationError

E = TypeVar("E", bound=StrEnum)


class NewsCategory(StrEnum):
    """Topic categories accepted by the headlines and sources endpoints."""

    BUSINESS = "business"
    ENTERTAINMENT = "entertainment"
    GENERAL = "general"
    HEALTH = "health"
    SCIENCE = "science"
    SPORTS = "sports"
    TECHNOLOGY = "technology"


class SearchIn(StrEnum):
    """Article fields the everything endpoint can restrict a query to."""

    TITLE = "title"
    DESCRIPTION = "description"
    CONTENT = "content"


class SortBy(StrEnum):
    """Result ordering for the everything endpoint."""

    RELEVANCY = "relevancy"
    POPULARITY = "popularity"
    PUBLISHED_AT = "publishedAt"


class ErrorCode(StrEnum):
    """Error codes the API documents for ``status == "error"`` responses."""

    API_KEY_DISABLED = "apiKeyDisabled"
    API_KEY_EXHAUSTED = "apiKeyExhausted"
    API_KEY_INVALID = "apiKeyInvalid"
    API_KEY_MISSING = "apiKeyMissing"
    PARAMETER_INVALID = "parameterInvalid"
    PARAMETERS_MISSING = "parametersMissing"
    RATE_LIMITED = "rateLimited"
    SOURCES_TOO_MANY = "sourcesTooMany"
    SOURCE_DOES_NOT_EXIST = "sourceDoesNotExist"
    UNEXPECTED_ERROR = "unexpectedError"


def encode(value: StrEnum | str) -> str:
    """Return the API token for an enum member, or a string already in wire form."""
    return str(value)


def _valid_options(enum_cls: type[StrEnum]) -> str:
    return ", ".join(member.value for member in enum_cls)


def _lookup(enum_cls: type[E], normalized: str) -> E | None:
    for member in enum_cls:
        if member.value.lower() == normalized:
            return member
    return None


def parse_category(text: str) -> NewsCategory:
    """Parse a category name, ignoring case.

    Raises:
        ValidationError: If ``text`` is not a known category.
    """
    member = _lookup(NewsCategory, text.lower())
    if member is None:
        msg = f"Invalid category: {text}. Valid options: {_valid_options(NewsCategory)}"
        raise ValidationError(msg)
    return member


def parse_sort_by(text: str) -> SortBy:
    """Parse a sort order, ignoring case and hyphens.

    ``"published-at"``, ``"publishedAt"`` and ``"PUBLISHED-AT"`` all map to
    ``SortBy.PUBLISHED_AT``.

    Raises:
        ValidationError: If ``text`` is not a known sort order.
    """
    member = _lookup(SortBy, text.lower().replace("-", ""))
    if member is None:
        msg = f"Invalid sort option: {text}. Valid options: {_valid_options(SortBy)}"
        raise ValidationError(msg)
    return member


def parse_search_in(text: str) -> list[SearchIn]:
    """Parse a comma-separated list of search-in fields.

    Items are stripped of surrounding whitespace and matched ignoring case.

    Raises:
        ValidationError: If any item (including an empty one) is not a known field.
    """
    result: list[SearchIn] = []
    for part in text.split(","):
        member = _lookup(SearchIn, part.strip().lower())
        if member is None:
            msg = f"Invalid search-in value: {part}. Valid options: {_valid_options(SearchIn)}"
            raise ValidationError(msg)
        result.append(member)
    return result
