"""
Core domain models and content transforms.

This package contains record types, record parsers and the content
normalizer, independent of any particular backing store.
"""

from .content import ListGroup, RenderUnit, normalize_blocks
from .parsing import parse_article, parse_author, parse_category, parse_content_block
from .types import (
    Article,
    ArticleMetadata,
    ArticleWithAuthor,
    Author,
    Category,
    CodeBlock,
    ContentBlock,
    Heading,
    ListItem,
    Paragraph,
    Quote,
    ReadOutcome,
    RecordError,
    RecordFormatError,
    UnknownBlockError,
)

__all__ = [
    "Article",
    "ArticleMetadata",
    "ArticleWithAuthor",
    "Author",
    "Category",
    "CodeBlock",
    "ContentBlock",
    "Heading",
    "ListItem",
    "Paragraph",
    "Quote",
    "ReadOutcome",
    "RecordError",
    "RecordFormatError",
    "UnknownBlockError",
    "ListGroup",
    "RenderUnit",
    "normalize_blocks",
    "parse_article",
    "parse_author",
    "parse_category",
    "parse_content_block",
]
