"""Abstract interfaces for content backing stores."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..core.types import Article, ArticleMetadata, Author, Category, ReadOutcome


class ArticleSource(ABC):
    """Read-only article store.

    Implementations report storage problems through load_articles() and
    never raise them from the query methods.
    """

    @abstractmethod
    def load_articles(self) -> ReadOutcome[Article]:
        """Return every article, most recently published first."""
        raise NotImplementedError

    @abstractmethod
    def get_article_by_slug(self, slug: str) -> Article | None:
        """Return the article with this exact slug, or None."""
        raise NotImplementedError

    def get_all_articles(self) -> list[Article]:
        return self.load_articles().items

    def get_articles_by_tag(self, tag: str) -> list[Article]:
        return [article for article in self.get_all_articles() if tag in article.tags]

    def get_articles_by_category(self, category_id: str) -> list[Article]:
        return [article for article in self.get_all_articles() if article.category == category_id]

    def get_articles_meta(self) -> list[ArticleMetadata]:
        return [article.metadata() for article in self.get_all_articles()]


class AuthorSource(ABC):
    @abstractmethod
    def load_authors(self) -> ReadOutcome[Author]:
        raise NotImplementedError

    def get_all_authors(self) -> list[Author]:
        return self.load_authors().items

    def get_author_by_id(self, author_id: str) -> Author | None:
        for author in self.get_all_authors():
            if author.id == author_id:
                return author
        return None


class CategorySource(ABC):
    @abstractmethod
    def load_categories(self) -> ReadOutcome[Category]:
        raise NotImplementedError

    def get_all_categories(self) -> list[Category]:
        return self.load_categories().items

    def get_category_by_id(self, category_id: str) -> Category | None:
        for category in self.get_all_categories():
            if category.id == category_id:
                return category
        return None

    def get_category_by_slug(self, slug: str) -> Category | None:
        for category in self.get_all_categories():
            if category.slug == slug:
                return category
        return None
