"""
Aggregation service over the content sources.

BlogService is the single entry point used by page-building code: it
combines the article store with the optional author and category
sources into lookup, filter, search and related-article queries.
"Not found" is always None or an empty list, never an exception.
"""

from __future__ import annotations

import logging
from typing import Callable

from .cache import SnapshotCache
from .config import AppConfig
from .core.types import Article, ArticleMetadata, ArticleWithAuthor, Author, Category, ReadOutcome
from .sources.base import ArticleSource, AuthorSource, CategorySource
from .sources.factory import create_sources

logger = logging.getLogger(__name__)

DEFAULT_FEATURED_LIMIT = 3
DEFAULT_RELATED_LIMIT = 3


class BlogService:
    """Read operations over articles, authors and categories.

    Attributes:
        articles: Article store
        authors: Author source, or None when the site has no author records
        categories: Category source, or None
    """

    def __init__(
        self,
        articles: ArticleSource,
        authors: AuthorSource | None = None,
        categories: CategorySource | None = None,
    ):
        self.articles = articles
        self.authors = authors
        self.categories = categories

    # Articles

    def load_articles(self) -> ReadOutcome[Article]:
        return self.articles.load_articles()

    def get_all_articles(self) -> list[Article]:
        return self.articles.get_all_articles()

    def get_article_by_slug(self, slug: str) -> Article | None:
        return self.articles.get_article_by_slug(slug)

    def get_articles_by_tag(self, tag: str) -> list[Article]:
        return self.articles.get_articles_by_tag(tag)

    def get_articles_by_category(self, category_id: str) -> list[Article]:
        return self.articles.get_articles_by_category(category_id)

    def get_articles_meta(self) -> list[ArticleMetadata]:
        return self.articles.get_articles_meta()

    def get_article_with_author(self, slug: str) -> ArticleWithAuthor | None:
        """Return the article joined with its author.

        The author is None when the article has no author id, the id does
        not match any author, or no author source is configured.
        """
        article = self.get_article_by_slug(slug)
        if article is None:
            return None
        author = self.get_author_by_id(article.author) if article.author else None
        if article.author and author is None:
            logger.debug(f"Author {article.author} not found for article {slug}")
        return ArticleWithAuthor(article=article, author=author)

    def get_static_slug_params(self) -> list[dict[str, str]]:
        """Return one {"slug": ...} entry per article, for page enumeration."""
        return [{"slug": article.slug} for article in self.get_all_articles()]

    def get_featured_articles(self, limit: int = DEFAULT_FEATURED_LIMIT) -> list[Article]:
        featured = [article for article in self.get_all_articles() if article.featured]
        return featured[: max(limit, 0)]

    def search_articles(self, query: str) -> list[Article]:
        """Case-insensitive substring search over title, description and tags."""
        q = query.lower()
        return [
            article
            for article in self.get_all_articles()
            if q in article.title.lower()
            or q in article.description.lower()
            or any(q in tag.lower() for tag in article.tags)
        ]

    def get_related_articles(self, slug: str, limit: int = DEFAULT_RELATED_LIMIT) -> list[Article]:
        """Return articles sharing at least one tag with the given article.

        The source article is excluded. Results keep publish-date order and
        are cut to limit; an unknown slug yields an empty list.
        """
        article = self.get_article_by_slug(slug)
        if article is None:
            return []

        source_tags = set(article.tags)
        related = [
            other
            for other in self.get_all_articles()
            if other.slug != slug and source_tags.intersection(other.tags)
        ]
        return related[: max(limit, 0)]

    # Authors and categories

    def get_all_authors(self) -> list[Author]:
        if self.authors is None:
            return []
        return self.authors.get_all_authors()

    def get_author_by_id(self, author_id: str) -> Author | None:
        if self.authors is None:
            return None
        return self.authors.get_author_by_id(author_id)

    def get_all_categories(self) -> list[Category]:
        if self.categories is None:
            return []
        return self.categories.get_all_categories()

    def get_category_by_id(self, category_id: str) -> Category | None:
        if self.categories is None:
            return None
        return self.categories.get_category_by_id(category_id)

    def get_category_by_slug(self, slug: str) -> Category | None:
        if self.categories is None:
            return None
        return self.categories.get_category_by_slug(slug)


def create_blog_service(cfg: AppConfig, clock: Callable[[], float] | None = None) -> BlogService:
    """Build a BlogService from configuration.

    Creates the snapshot cache shared by the author and category sources
    and selects the backing store through the source registry.
    """
    cache = SnapshotCache(ttl_seconds=cfg.cache.ttl_seconds, clock=clock)
    bundle = create_sources(cfg.source, cache)
    return BlogService(bundle.articles, authors=bundle.authors, categories=bundle.categories)
