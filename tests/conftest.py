"""Shared fixtures: sample API payloads."""

from __future__ import annotations

import pytest


@pytest.fixture
def articles_payload() -> dict:
    """Sample ``/top-headlines`` or ``/everything`` response."""
    return {
        "status": "ok",
        "totalResults": 2,
        "articles": [
            {
                "source": {"id": "bbc-news", "name": "BBC News"},
                "author": "Jane Doe",
                "title": "Article 1",
                "description": "Description 1",
                "url": "https://example.com/article1",
                "urlToImage": "https://example.com/article1.jpg",
                "publishedAt": "2024-01-01T10:00:00Z",
                "content": "Content 1 [+100 chars]",
            },
            {
                "source": {"id": None, "name": "Other News"},
                "author": None,
                "title": "Article 2",
                "description": None,
                "url": "https://example.com/article2",
                "urlToImage": None,
                "publishedAt": "2024-01-01T11:00:00Z",
                "content": None,
            },
        ],
    }


@pytest.fixture
def sources_payload() -> dict:
    """Sample ``/sources`` response."""
    return {
        "status": "ok",
        "sources": [
            {
                "id": "bbc-news",
                "name": "BBC News",
                "description": "Use BBC News for up-to-the-minute news.",
                "url": "https://www.bbc.co.uk/news",
                "category": "general",
                "language": "en",
                "country": "gb",
            },
            {
                "id": "wired",
                "name": "Wired",
                "description": "",
                "url": "https://www.wired.com",
                "category": "technology",
                "language": "en",
                "country": "us",
            },
        ],
    }


@pytest.fixture
def error_payload() -> dict:
    """Sample API error response."""
    return {
        "status": "error",
        "code": "apiKeyInvalid",
        "message": "Your API key is invalid or incorrect.",
    }
