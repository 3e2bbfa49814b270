"""
Blog Content - data access layer for a statically-rendered blog.

This package reads article, author and category records from JSON files
and exposes lookup, filter, search and related-article queries for
page-building code.

Example:
    >>> from blog_content import AppConfig, create_blog_service
    >>> service = create_blog_service(AppConfig())
    >>> service.get_featured_articles(limit=3)
"""

__all__ = [
    "__version__",
    "AppConfig",
    "BlogService",
    "SnapshotCache",
    "create_blog_service",
    "load_config",
    "normalize_blocks",
]
__version__ = "0.1.0"

from .cache import SnapshotCache
from .config import AppConfig, load_config
from .core.content import normalize_blocks
from .service import BlogService, create_blog_service
