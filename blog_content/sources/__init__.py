"""
Backing stores for blog content.

Each store implements the ArticleSource / AuthorSource / CategorySource
interfaces; the factory picks one by configured name.
"""

from .base import ArticleSource, AuthorSource, CategorySource
from .factory import SourceBundle, available_sources, create_sources, register_source
from .json_source import JsonArticleSource, JsonAuthorSource, JsonCategorySource

__all__ = [
    "ArticleSource",
    "AuthorSource",
    "CategorySource",
    "JsonArticleSource",
    "JsonAuthorSource",
    "JsonCategorySource",
    "SourceBundle",
    "available_sources",
    "create_sources",
    "register_source",
]
