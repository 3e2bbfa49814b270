"""Parsers turning stored JSON records into typed records.

Article records use camelCase keys:

    {
        "id": "1",
        "title": "Getting Started",
        "slug": "getting-started",
        "description": "First steps",
        "author": "author-1",
        "publishedAt": "2026-01-09T10:00:00Z",
        "updatedAt": "2026-01-10T08:00:00Z",
        "tags": ["python", "intro"],
        "category": "tutorials",
        "featured": true,
        "readingTime": 5,
        "content": [
            {"type": "heading", "content": "Intro", "level": 2},
            {"type": "paragraph", "content": "Hello."},
            {"type": "list", "content": "first", "ordered": true},
            {"type": "code", "content": "print(1)", "language": "python"}
        ]
    }
"""

from __future__ import annotations

import logging
from typing import Any

from ..utils.formatting import parse_iso8601
from .types import (
    Article,
    Author,
    Category,
    CodeBlock,
    ContentBlock,
    Heading,
    ListItem,
    Paragraph,
    Quote,
    RecordFormatError,
    UnknownBlockError,
)

logger = logging.getLogger(__name__)

DEFAULT_HEADING_LEVEL = 2


def parse_content_block(data: Any) -> ContentBlock:
    """Parse one content block dictionary.

    Raises:
        UnknownBlockError: If the type tag is not one of the known kinds
        RecordFormatError: If the block is not a mapping
    """
    if not isinstance(data, dict):
        raise RecordFormatError(f"Content block must be an object, got {type(data).__name__}")

    kind = data.get("type")
    text = _as_text(data.get("content"))

    if kind == "paragraph":
        return Paragraph(text=text)
    if kind == "heading":
        return Heading(text=text, level=_heading_level(data.get("level")))
    if kind == "code":
        return CodeBlock(text=text, language=data.get("language") or None)
    if kind == "quote":
        return Quote(text=text)
    if kind == "list":
        return ListItem(text=text, ordered=_flag(data, "ordered"))
    raise UnknownBlockError(kind)


def parse_article(data: Any, unknown_blocks: str = "drop") -> Article:
    """Parse an article record.

    Args:
        data: Decoded JSON object
        unknown_blocks: "drop" to skip unknown content blocks with a warning,
            "error" to reject the record

    Raises:
        RecordFormatError: If required fields are missing or malformed
    """
    if not isinstance(data, dict):
        raise RecordFormatError("Article record must be an object")

    slug = _required_str(data, "slug")
    published_at = _timestamp(data, "publishedAt")
    updated_at = _timestamp(data, "updatedAt") if data.get("updatedAt") else published_at

    raw_content = data.get("content") or []
    if not isinstance(raw_content, list):
        raise RecordFormatError("Field 'content' must be a list")

    blocks: list[ContentBlock] = []
    for raw_block in raw_content:
        try:
            blocks.append(parse_content_block(raw_block))
        except UnknownBlockError as exc:
            if unknown_blocks == "error":
                raise
            logger.warning(
                f"Dropping content block with unknown type {exc.kind!r} in article {slug}",
                extra={"slug": slug, "block_type": exc.kind},
            )

    tags = data.get("tags") or []
    if not isinstance(tags, list):
        raise RecordFormatError("Field 'tags' must be a list")

    try:
        reading_time = int(data.get("readingTime") or 0)
    except (TypeError, ValueError) as exc:
        raise RecordFormatError(f"Field 'readingTime' must be an integer: {exc}") from exc

    return Article(
        id=_required_str(data, "id"),
        title=_required_str(data, "title"),
        slug=slug,
        description=_as_text(data.get("description")),
        author=data.get("author") or None,
        published_at=published_at,
        updated_at=updated_at,
        tags=tuple(str(tag) for tag in tags),
        category=data.get("category") or None,
        featured=_flag(data, "featured"),
        reading_time=reading_time,
        content=tuple(blocks),
    )


def parse_author(data: Any) -> Author:
    if not isinstance(data, dict):
        raise RecordFormatError("Author record must be an object")
    return Author(
        id=_required_str(data, "id"),
        name=_required_str(data, "name"),
        email=_as_text(data.get("email")),
        bio=_as_text(data.get("bio")),
        avatar=data.get("avatar") or None,
    )


def parse_category(data: Any) -> Category:
    if not isinstance(data, dict):
        raise RecordFormatError("Category record must be an object")
    return Category(
        id=_required_str(data, "id"),
        name=_required_str(data, "name"),
        slug=_required_str(data, "slug"),
        description=_as_text(data.get("description")),
    )


def _required_str(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None or value == "":
        raise RecordFormatError(f"Missing required field '{key}'")
    return str(value)


def _flag(data: dict[str, Any], key: str) -> bool:
    value = data.get(key, False)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise RecordFormatError(f"Field '{key}' must be a boolean, got {value!r}")
    return value


def _timestamp(data: dict[str, Any], key: str) -> str:
    value = _required_str(data, key)
    try:
        parse_iso8601(value)
    except ValueError as exc:
        raise RecordFormatError(f"Field '{key}' is not an ISO 8601 timestamp: {value!r}") from exc
    return value


def _heading_level(value: Any) -> int:
    # Out-of-range or non-numeric levels fall back to h2.
    if isinstance(value, bool):
        return DEFAULT_HEADING_LEVEL
    try:
        level = int(value)
    except (TypeError, ValueError):
        return DEFAULT_HEADING_LEVEL
    if 1 <= level <= 6:
        return level
    return DEFAULT_HEADING_LEVEL


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)
