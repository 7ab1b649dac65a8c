"""Pydantic models for API response bodies.

Wire keys are camelCase; models accept either the alias or the field name
and dump by alias so JSON output matches the upstream shape.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from newsapi_client.data.enums import ErrorCode


class _Entity(BaseModel):
    """Base for article/source entities whose string fields may be null upstream."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("*", mode="before")
    @classmethod
    def null_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class ArticleSource(_Entity):
    """Source reference embedded in an article."""

    id: str = ""
    name: str = ""


class Article(_Entity):
    """A news article. Empty strings mean the publisher did not provide the field."""

    source: ArticleSource = Field(default_factory=ArticleSource)
    author: str = ""
    title: str = ""
    description: str = ""
    url: str = ""
    url_to_image: str = Field(default="", alias="urlToImage")
    published_at: str = Field(default="", alias="publishedAt")
    content: str = ""

    @field_validator("source", mode="before")
    @classmethod
    def null_source(cls, v: Any) -> Any:
        return {} if v is None or v == "" else v


class Source(_Entity):
    """A news publisher from the sources catalog."""

    id: str = ""
    name: str = ""
    description: str = ""
    url: str = ""
    category: str = ""
    language: str = ""
    country: str = ""


class ArticlesResponse(BaseModel):
    """Response of ``/top-headlines`` and ``/everything``."""

    status: str
    total_results: int = Field(alias="totalResults")
    articles: list[Article]

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class SourcesResponse(BaseModel):
    """Response of ``/sources``."""

    status: str
    sources: list[Source]

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class ErrorResponse(BaseModel):
    """Error body returned by any endpoint (``status == "error"``)."""

    status: str = "error"
    code: ErrorCode | str
    message: str

    model_config = ConfigDict(frozen=True, populate_by_name=True)


NewsResponse = ArticlesResponse | SourcesResponse
