"""
JSON file-backed content sources.

Layout under the content root:
- articles/*.json: one article record per file
- authors/authors.json: list of author records
- categories/categories.json: list of category records

Read and parse failures are logged and reported through ReadOutcome;
query methods degrade to an empty list or None instead of raising.
"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Any, Callable, TypeVar

from ..cache import SnapshotCache
from ..core.parsing import parse_article, parse_author, parse_category
from ..core.types import Article, Author, Category, ReadOutcome, RecordError
from ..utils.logging import log_event
from .base import ArticleSource, AuthorSource, CategorySource

logger = logging.getLogger(__name__)

T = TypeVar("T")


class JsonArticleSource(ArticleSource):
    """Article store reading one JSON file per article.

    Attributes:
        articles_dir: Directory holding the article files
        extension: Suffix a file needs to be treated as a record
        on_invalid_record: "skip" or "fail", see load_articles()
        unknown_blocks: Passed to parse_article()
    """

    def __init__(
        self,
        articles_dir: Path,
        extension: str = ".json",
        on_invalid_record: str = "skip",
        unknown_blocks: str = "drop",
        max_concurrent_reads: int = 8,
    ):
        if on_invalid_record not in ("skip", "fail"):
            raise ValueError(f"Unsupported on_invalid_record policy: {on_invalid_record}")
        if unknown_blocks not in ("drop", "error"):
            raise ValueError(f"Unsupported unknown_blocks policy: {unknown_blocks}")
        self.articles_dir = Path(articles_dir)
        self.extension = extension
        self.on_invalid_record = on_invalid_record
        self.unknown_blocks = unknown_blocks
        self._read_slots = threading.BoundedSemaphore(max(1, max_concurrent_reads))

    def load_articles(self) -> ReadOutcome[Article]:
        """Read every article record, newest publish date first.

        With on_invalid_record="skip" a malformed record is left out and
        listed in errors (status "partial"). With "fail" the first malformed
        record fails the whole collection (status "failed", no items).
        A missing or unreadable directory always fails the collection.
        """
        try:
            files = self._record_files()
        except OSError as exc:
            logger.error(f"Error reading articles directory {self.articles_dir}: {exc}")
            return ReadOutcome.failure(str(self.articles_dir), str(exc))

        articles: list[Article] = []
        errors: list[RecordError] = []
        for path in files:
            try:
                articles.append(self._read_record(path))
            except (OSError, ValueError) as exc:
                error = RecordError(path=str(path), message=str(exc))
                if self.on_invalid_record == "fail":
                    logger.error(f"Error reading article {path}: {exc}")
                    return ReadOutcome(items=[], errors=errors + [error], status="failed")
                logger.warning(f"Skipping invalid article {path}: {exc}")
                errors.append(error)

        articles.sort(key=lambda article: article.published, reverse=True)
        log_event(logger, "Loaded articles", level=logging.DEBUG, count=len(articles), skipped=len(errors))
        return ReadOutcome(items=articles, errors=errors, status="partial" if errors else "ok")

    def get_article_by_slug(self, slug: str) -> Article | None:
        try:
            files = self._record_files()
        except OSError as exc:
            logger.error(f"Error reading articles directory {self.articles_dir}: {exc}")
            return None

        for path in files:
            try:
                article = self._read_record(path)
            except (OSError, ValueError) as exc:
                if self.on_invalid_record == "fail":
                    logger.error(f"Error reading article {path}: {exc}")
                    return None
                logger.warning(f"Skipping invalid article {path}: {exc}")
                continue
            if article.slug == slug:
                return article
        return None

    def _record_files(self) -> list[Path]:
        return sorted(
            path
            for path in self.articles_dir.iterdir()
            if path.is_file() and path.name.endswith(self.extension)
        )

    def _read_record(self, path: Path) -> Article:
        with self._read_slots:
            text = path.read_text(encoding="utf-8")
        return parse_article(json.loads(text), unknown_blocks=self.unknown_blocks)


class JsonAuthorSource(AuthorSource):
    """Author collection read from a single JSON list file.

    When a SnapshotCache is given, the parsed collection is reused until
    the cache TTL elapses.
    """

    def __init__(self, path: Path, cache: SnapshotCache | None = None):
        self.path = Path(path)
        self.cache = cache

    def load_authors(self) -> ReadOutcome[Author]:
        if self.cache is None:
            return self._read()
        return self.cache.get(f"authors:{self.path}", self._read)

    def _read(self) -> ReadOutcome[Author]:
        return _read_collection(self.path, parse_author, "authors")


class JsonCategorySource(CategorySource):
    """Category collection read from a single JSON list file."""

    def __init__(self, path: Path, cache: SnapshotCache | None = None):
        self.path = Path(path)
        self.cache = cache

    def load_categories(self) -> ReadOutcome[Category]:
        if self.cache is None:
            return self._read()
        return self.cache.get(f"categories:{self.path}", self._read)

    def _read(self) -> ReadOutcome[Category]:
        return _read_collection(self.path, parse_category, "categories")


def _read_collection(path: Path, parser: Callable[[Any], T], label: str) -> ReadOutcome[T]:
    """Read a JSON list file, parsing each entry and skipping malformed ones."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, ValueError) as exc:
        logger.error(f"Error reading {label} from {path}: {exc}")
        return ReadOutcome.failure(str(path), str(exc))

    if not isinstance(raw, list):
        message = f"Expected a list of {label}, got {type(raw).__name__}"
        logger.error(f"Error reading {label} from {path}: {message}")
        return ReadOutcome.failure(str(path), message)

    items: list[T] = []
    errors: list[RecordError] = []
    for index, entry in enumerate(raw):
        try:
            items.append(parser(entry))
        except ValueError as exc:
            logger.warning(f"Skipping invalid {label} entry #{index} in {path}: {exc}")
            errors.append(RecordError(path=f"{path}#{index}", message=str(exc)))

    return ReadOutcome(items=items, errors=errors, status="partial" if errors else "ok")
