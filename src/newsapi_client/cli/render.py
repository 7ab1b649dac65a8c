"""Rendering of API responses as Markdown or JSON.

Typed responses and raw upstream JSON share one Markdown renderer: raw text
is first normalized into the same response models, with placeholders for
missing fields.
"""

import json
from enum import StrEnum
from pathlib import Path
from typing import Any

from newsapi_client.data.responses import (
    Article,
    ArticlesResponse,
    ArticleSource,
    ErrorResponse,
    Source,
    SourcesResponse,
)

Payload = ArticlesResponse | SourcesResponse | ErrorResponse


class OutputFormat(StrEnum):
    """Output formats selectable on the command line."""

    MARKDOWN = "markdown"
    JSON = "json"
    PRETTY = "pretty"


# ============================================================
# Raw JSON normalization
# ============================================================


def _get_str(data: Any, key: str, default: str) -> str:
    value = data.get(key) if isinstance(data, dict) else None
    return value if isinstance(value, str) else default


def _get_int(data: Any, key: str, default: int) -> int:
    value = data.get(key) if isinstance(data, dict) else None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return default


def _get_list(data: dict[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    return value if isinstance(value, list) else []


def _raw_article(item: Any) -> Article:
    source = item.get("source") if isinstance(item, dict) else None
    return Article(
        source=ArticleSource(
            id=_get_str(source, "id", ""),
            name=_get_str(source, "name", "Unknown"),
        ),
        author=_get_str(item, "author", "Unknown"),
        title=_get_str(item, "title", "No title"),
        description=_get_str(item, "description", ""),
        url=_get_str(item, "url", ""),
        url_to_image=_get_str(item, "urlToImage", ""),
        published_at=_get_str(item, "publishedAt", ""),
        content=_get_str(item, "content", ""),
    )


def _raw_source(item: Any) -> Source:
    return Source(
        id=_get_str(item, "id", ""),
        name=_get_str(item, "name", "Unknown"),
        description=_get_str(item, "description", ""),
        url=_get_str(item, "url", ""),
        category=_get_str(item, "category", ""),
        language=_get_str(item, "language", ""),
        country=_get_str(item, "country", ""),
    )


def normalize_raw(text: str) -> Payload | None:
    """Sniff raw upstream JSON and convert it into a response model.

    The shape is decided by ``status == "error"``, then an ``articles`` key,
    then a ``sources`` key. Missing fields get placeholders instead of
    failing. Returns None if the text is not JSON or matches no shape.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        return None
    if not isinstance(data, dict):
        return None

    if data.get("status") == "error":
        return ErrorResponse(
            code=_get_str(data, "code", "unknown"),
            message=_get_str(data, "message", "An error occurred"),
        )
    if "articles" in data:
        return ArticlesResponse(
            status=_get_str(data, "status", ""),
            total_results=_get_int(data, "totalResults", 0),
            articles=[_raw_article(item) for item in _get_list(data, "articles")],
        )
    if "sources" in data:
        return SourcesResponse(
            status=_get_str(data, "status", ""),
            sources=[_raw_source(item) for item in _get_list(data, "sources")],
        )
    return None


# ============================================================
# Markdown
# ============================================================


def _article_to_markdown(article: Article) -> str:
    lines = [
        f"## {article.title}\n\n",
        f"**Source:** {article.source.name}  \n",
        f"**Author:** {article.author}  \n",
        f"**Published:** {article.published_at}  \n",
    ]
    if article.description:
        lines.append(f"\n{article.description}\n\n")
    if article.url:
        lines.append(f"[Read more]({article.url})\n\n")
    if article.url_to_image:
        lines.append(f"![Image]({article.url_to_image})\n\n")
    lines.append("---\n\n")
    return "".join(lines)


def _source_to_markdown(source: Source) -> str:
    lines = [f"## {source.name}\n\n"]
    if source.id:
        lines.append(f"**ID:** `{source.id}`  \n")
    if source.category:
        lines.append(f"**Category:** {source.category}  \n")
    if source.language:
        lines.append(f"**Language:** {source.language}  \n")
    if source.country:
        lines.append(f"**Country:** {source.country}  \n")
    if source.description:
        lines.append(f"\n{source.description}\n\n")
    if source.url:
        lines.append(f"[Visit source]({source.url})\n\n")
    lines.append("---\n\n")
    return "".join(lines)


def render_markdown(payload: Payload) -> str:
    """Render a response model as Markdown."""
    if isinstance(payload, ErrorResponse):
        return f"# Error\n\n**Code:** {payload.code}  \n**Message:** {payload.message}\n"
    if isinstance(payload, ArticlesResponse):
        header = f"# News Articles\n\n**Total Results:** {payload.total_results}\n\n---\n\n"
        return header + "".join(_article_to_markdown(a) for a in payload.articles)
    return "# News Sources\n\n" + "".join(_source_to_markdown(s) for s in payload.sources)


# ============================================================
# Entry points
# ============================================================


def render(payload: Payload, fmt: OutputFormat) -> str:
    """Render a typed response in the requested format."""
    if fmt is OutputFormat.MARKDOWN:
        return render_markdown(payload)
    if fmt is OutputFormat.PRETTY:
        return payload.model_dump_json(by_alias=True, indent=2)
    return payload.model_dump_json(by_alias=True)


def render_raw(text: str, fmt: OutputFormat) -> str:
    """Render a raw upstream body in the requested format.

    JSON passes through unchanged; pretty JSON is re-indented; Markdown goes
    through ``normalize_raw``. Text that cannot be parsed or recognized is
    returned as-is.
    """
    if fmt is OutputFormat.JSON:
        return text
    if fmt is OutputFormat.PRETTY:
        try:
            return json.dumps(json.loads(text), indent=2, ensure_ascii=False)
        except json.JSONDecodeError:
            return text
    payload = normalize_raw(text)
    if payload is None:
        return text
    return render_markdown(payload)


def write_output(text: str, output: Path | None) -> None:
    """Print ``text``, or write it to ``output`` and print a confirmation."""
    if output is None:
        print(text)
        return
    output.write_text(text, encoding="utf-8")
    print(f"Output written to: {output}")
