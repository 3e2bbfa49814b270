"""Tests for BlogService aggregation queries."""

from __future__ import annotations

from pathlib import Path

import pytest

from blog_content.config import AppConfig
from blog_content.core.types import Article, ReadOutcome
from blog_content.service import BlogService, create_blog_service
from blog_content.sources.base import ArticleSource
from blog_content.sources.json_source import JsonArticleSource, JsonAuthorSource, JsonCategorySource

from conftest import article_record, write_json


@pytest.fixture
def service(content_dir: Path) -> BlogService:
    return BlogService(
        JsonArticleSource(content_dir / "articles"),
        authors=JsonAuthorSource(content_dir / "authors" / "authors.json"),
        categories=JsonCategorySource(content_dir / "categories" / "categories.json"),
    )


def _slugs(articles: list[Article]) -> list[str]:
    return [article.slug for article in articles]


def test_all_articles_and_related_scenario(service: BlogService):
    assert _slugs(service.get_all_articles()) == ["b", "c", "a"]
    assert _slugs(service.get_related_articles("a", 5)) == ["b"]


def test_related_excludes_source_and_respects_limit(tmp_path: Path):
    articles = tmp_path / "articles"
    write_json(articles / "1.json", article_record("src", "2024-01-01T00:00:00Z", ["py"]))
    for day in range(2, 7):
        write_json(
            articles / f"{day}.json",
            article_record(f"p{day}", f"2024-01-0{day}T00:00:00Z", ["py", "misc"]),
        )
    write_json(articles / "9.json", article_record("other", "2024-02-01T00:00:00Z", ["go"]))
    service = BlogService(JsonArticleSource(articles))

    assert _slugs(service.get_related_articles("src")) == ["p6", "p5", "p4"]
    assert _slugs(service.get_related_articles("src", limit=10)) == ["p6", "p5", "p4", "p3", "p2"]
    assert _slugs(service.get_related_articles("p6", limit=10)) == ["p5", "p4", "p3", "p2", "src"]
    assert service.get_related_articles("src", limit=0) == []
    assert service.get_related_articles("src", limit=-1) == []


def test_related_for_unknown_slug_is_empty(service: BlogService):
    assert service.get_related_articles("missing") == []


def test_related_article_without_tags_has_no_matches(tmp_path: Path):
    articles = tmp_path / "articles"
    write_json(articles / "a.json", article_record("a", "2024-01-01T00:00:00Z", []))
    write_json(articles / "b.json", article_record("b", "2024-01-02T00:00:00Z", ["x"]))

    assert BlogService(JsonArticleSource(articles)).get_related_articles("a") == []


def test_featured_articles_keep_order_and_limit(service: BlogService):
    assert _slugs(service.get_featured_articles()) == ["c", "a"]
    assert _slugs(service.get_featured_articles(1)) == ["c"]
    assert all(article.featured for article in service.get_featured_articles(10))


def test_search_matches_title_description_and_tags(service: BlogService):
    assert _slugs(service.search_articles("title b")) == ["b"]
    assert _slugs(service.search_articles("DESCRIPTION OF C")) == ["c"]
    assert _slugs(service.search_articles("Y")) == ["b", "a"]
    assert service.search_articles("nothing like this") == []


def test_search_tag_substring(tmp_path: Path):
    articles = tmp_path / "articles"
    write_json(
        articles / "a.json",
        article_record("a", "2024-01-01T00:00:00Z", ["Python"], title="Hello", description="World"),
    )

    assert _slugs(BlogService(JsonArticleSource(articles)).search_articles("pyth")) == ["a"]


def test_static_slug_params(service: BlogService):
    assert service.get_static_slug_params() == [{"slug": "b"}, {"slug": "c"}, {"slug": "a"}]


def test_article_with_author_joins_author(service: BlogService):
    joined = service.get_article_with_author("a")

    assert joined is not None
    assert joined.article.slug == "a"
    assert joined.author is not None
    assert joined.author.name == "Hanako"


def test_article_with_dangling_or_missing_author(service: BlogService):
    dangling = service.get_article_with_author("b")
    no_author = service.get_article_with_author("c")

    assert dangling is not None and dangling.author is None
    assert no_author is not None and no_author.author is None
    assert service.get_article_with_author("missing") is None


def test_article_with_author_without_author_source(content_dir: Path):
    service = BlogService(JsonArticleSource(content_dir / "articles"))

    joined = service.get_article_with_author("a")

    assert joined is not None
    assert joined.author is None
    assert service.get_all_authors() == []
    assert service.get_category_by_id("news") is None


def test_reference_lookups(service: BlogService):
    assert [author.id for author in service.get_all_authors()] == ["author-1", "author-2"]
    assert service.get_author_by_id("author-2").name == "Taro"
    assert [category.id for category in service.get_all_categories()] == ["general", "news"]
    assert service.get_category_by_id("general").name == "General"
    assert service.get_category_by_slug("news-and-updates").name == "News"
    assert service.get_author_by_id("nobody") is None


def test_failed_store_degrades_to_empty(tmp_path: Path):
    service = BlogService(JsonArticleSource(tmp_path / "missing"))

    assert service.load_articles().failed
    assert service.get_all_articles() == []
    assert service.get_featured_articles() == []
    assert service.search_articles("a") == []
    assert service.get_static_slug_params() == []
    assert service.get_articles_meta() == []


def test_service_accepts_any_article_source():
    class StaticSource(ArticleSource):
        def __init__(self, articles: list[Article]):
            self.articles = articles

        def load_articles(self) -> ReadOutcome[Article]:
            return ReadOutcome(items=list(self.articles))

        def get_article_by_slug(self, slug: str) -> Article | None:
            return next((a for a in self.articles if a.slug == slug), None)

    article = Article(
        id="1",
        title="Static",
        slug="static",
        description="",
        published_at="2024-01-01T00:00:00Z",
        updated_at="2024-01-01T00:00:00Z",
        tags=("t",),
    )
    service = BlogService(StaticSource([article]))

    assert service.get_articles_by_tag("t") == [article]
    assert service.get_articles_meta()[0] == article.metadata()


def test_create_blog_service_from_config(content_dir: Path):
    cfg = AppConfig()
    cfg.source.content_dir = str(content_dir)
    now = [0.0]

    service = create_blog_service(cfg, clock=lambda: now[0])

    assert _slugs(service.get_all_articles()) == ["b", "c", "a"]
    assert service.get_article_with_author("a").author.name == "Hanako"

    write_json(content_dir / "authors" / "authors.json", [{"id": "author-1", "name": "Renamed"}])
    assert service.get_author_by_id("author-1").name == "Hanako"
    now[0] = cfg.cache.ttl_seconds
    assert service.get_author_by_id("author-1").name == "Renamed"


def test_create_blog_service_uses_environment_source(content_dir: Path, monkeypatch):
    cfg = AppConfig()
    cfg.source.content_dir = str(content_dir)

    monkeypatch.setenv("BLOG_SOURCE_TYPE", "json")
    assert isinstance(create_blog_service(cfg).articles, JsonArticleSource)

    monkeypatch.setenv("BLOG_SOURCE_TYPE", "database")
    with pytest.raises(ValueError, match="Unsupported source type"):
        create_blog_service(cfg)
