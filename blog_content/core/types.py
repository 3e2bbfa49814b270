"""
Core data types for the blog content layer.

This module defines the records read from the content store:
- ArticleMetadata: Article fields used by listing views
- Article: Metadata plus the ordered content blocks
- Paragraph, Heading, CodeBlock, Quote, ListItem: Content block kinds
- Author / Category: Reference records weakly linked from articles
- ArticleWithAuthor: Article joined with its (possibly unknown) author
- ReadOutcome: Result of reading a collection, with per-record errors
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Generic, TypeVar, Union

from ..utils.formatting import parse_iso8601


class RecordFormatError(ValueError):
    """Raised when a stored record does not match the expected shape."""


class UnknownBlockError(RecordFormatError):
    """Raised when a content block carries an unrecognized type tag."""

    def __init__(self, kind: object):
        super().__init__(f"Unknown content block type: {kind!r}")
        self.kind = kind


@dataclass(frozen=True)
class Paragraph:
    text: str


@dataclass(frozen=True)
class Heading:
    """Section heading. Level is 1-6."""

    text: str
    level: int = 2


@dataclass(frozen=True)
class CodeBlock:
    text: str
    language: str | None = None


@dataclass(frozen=True)
class Quote:
    text: str


@dataclass(frozen=True)
class ListItem:
    """One item of an ordered or unordered list.

    Consecutive items are grouped into a single list by the normalizer.
    """

    text: str
    ordered: bool = False


ContentBlock = Union[Paragraph, Heading, CodeBlock, Quote, ListItem]


@dataclass(frozen=True)
class ArticleMetadata:
    """Article fields without the content body.

    Attributes:
        id: Stable record identifier
        title: Article headline
        slug: URL-safe identifier, unique across all articles
        description: Short summary shown in listings
        author: Author id, or None when the record has no author
        published_at: ISO 8601 publish timestamp as stored
        updated_at: ISO 8601 last-update timestamp as stored
        tags: Tag strings, in stored order
        category: Category id, or None
        featured: Whether the article is promoted on the front page
        reading_time: Estimated reading time in minutes
    """

    id: str
    title: str
    slug: str
    description: str
    published_at: str
    updated_at: str
    author: str | None = None
    tags: tuple[str, ...] = ()
    category: str | None = None
    featured: bool = False
    reading_time: int = 0

    @property
    def published(self) -> datetime:
        return parse_iso8601(self.published_at)


@dataclass(frozen=True)
class Article(ArticleMetadata):
    """A full article: metadata plus ordered content blocks."""

    content: tuple[ContentBlock, ...] = ()

    def metadata(self) -> ArticleMetadata:
        """Return the metadata projection (every field except content)."""
        values = {f.name: getattr(self, f.name) for f in fields(ArticleMetadata)}
        return ArticleMetadata(**values)


@dataclass(frozen=True)
class Author:
    id: str
    name: str
    email: str = ""
    bio: str = ""
    avatar: str | None = None


@dataclass(frozen=True)
class Category:
    id: str
    name: str
    slug: str
    description: str = ""


@dataclass(frozen=True)
class ArticleWithAuthor:
    """Article joined with its author record.

    Attributes:
        article: The article as read from the store
        author: The referenced author, or None when the id is missing or dangling
    """

    article: Article
    author: Author | None = None


@dataclass(frozen=True)
class RecordError:
    """A record (or whole collection) that could not be read.

    Attributes:
        path: File the error relates to
        message: Human-readable error description
    """

    path: str
    message: str


T = TypeVar("T")


@dataclass
class ReadOutcome(Generic[T]):
    """Result of reading a collection from storage.

    Status values:
    - "ok": every record was read (items may still be empty)
    - "partial": some records were skipped, see errors
    - "failed": the collection could not be read, items is empty
    """

    items: list[T] = field(default_factory=list)
    errors: list[RecordError] = field(default_factory=list)
    status: str = "ok"

    @property
    def failed(self) -> bool:
        return self.status == "failed"

    @property
    def is_empty(self) -> bool:
        return not self.items

    @classmethod
    def failure(cls, path: str, message: str) -> "ReadOutcome[T]":
        return cls(items=[], errors=[RecordError(path=path, message=message)], status="failed")
