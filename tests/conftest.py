"""Shared fixtures: small JSON content trees on disk."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest


def article_record(slug: str, published_at: str, tags: list[str] | None = None, **overrides: Any) -> dict[str, Any]:
    record: dict[str, Any] = {
        "id": f"id-{slug}",
        "title": f"Title {slug.upper()}",
        "slug": slug,
        "description": f"Description of {slug}",
        "author": "author-1",
        "publishedAt": published_at,
        "updatedAt": published_at,
        "tags": tags or [],
        "category": "general",
        "featured": False,
        "readingTime": 4,
        "content": [
            {"type": "paragraph", "content": f"Body of {slug}"},
        ],
    }
    record.update(overrides)
    return record


def write_json(path: Path, payload: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    """Content root with articles a (oldest), c and b (newest)."""
    root = tmp_path / "content"
    articles = root / "articles"
    write_json(
        articles / "a.json",
        article_record(
            "a",
            "2024-01-01T00:00:00Z",
            ["x", "y"],
            featured=True,
            content=[
                {"type": "heading", "content": "Intro", "level": 2},
                {"type": "paragraph", "content": "Hello."},
                {"type": "list", "content": "first", "ordered": True},
                {"type": "list", "content": "second", "ordered": True},
                {"type": "code", "content": "print(1)", "language": "python"},
            ],
        ),
    )
    write_json(
        articles / "b.json",
        article_record("b", "2024-06-01T00:00:00Z", ["y"], author="ghost", category="news"),
    )
    write_json(
        articles / "c.json",
        article_record("c", "2024-03-01T00:00:00Z", ["z"], featured=True, author=None),
    )
    write_json(
        root / "authors" / "authors.json",
        [
            {"id": "author-1", "name": "Hanako", "email": "hanako@example.com", "bio": "Writes things."},
            {"id": "author-2", "name": "Taro", "email": "taro@example.com", "bio": "", "avatar": "/taro.png"},
        ],
    )
    write_json(
        root / "categories" / "categories.json",
        [
            {"id": "general", "name": "General", "slug": "general", "description": "Everything else"},
            {"id": "news", "name": "News", "slug": "news-and-updates", "description": "Announcements"},
        ],
    )
    return root
