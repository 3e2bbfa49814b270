"""Source factory and registry for swappable backing stores."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from ..cache import SnapshotCache
from ..config import SourceConfig, get_source_type
from .base import ArticleSource, AuthorSource, CategorySource
from .json_source import JsonArticleSource, JsonAuthorSource, JsonCategorySource


@dataclass
class SourceBundle:
    """The sources backing one BlogService."""

    articles: ArticleSource
    authors: AuthorSource | None = None
    categories: CategorySource | None = None


SourceBuilder = Callable[[SourceConfig, SnapshotCache], SourceBundle]


def _build_json_sources(cfg: SourceConfig, cache: SnapshotCache) -> SourceBundle:
    root = Path(cfg.content_dir)
    return SourceBundle(
        articles=JsonArticleSource(
            root / cfg.articles_dir,
            extension=cfg.extension,
            on_invalid_record=cfg.on_invalid_record,
            unknown_blocks=cfg.unknown_blocks,
            max_concurrent_reads=cfg.max_concurrent_reads,
        ),
        authors=JsonAuthorSource(root / cfg.authors_file, cache=cache),
        categories=JsonCategorySource(root / cfg.categories_file, cache=cache),
    )


_SOURCE_REGISTRY: dict[str, SourceBuilder] = {
    "json": _build_json_sources,
}


def available_sources() -> list[str]:
    """Return the set of registered source names."""
    return sorted(_SOURCE_REGISTRY.keys())


def register_source(name: str, builder: SourceBuilder) -> None:
    _SOURCE_REGISTRY[name.lower().strip()] = builder


def create_sources(cfg: SourceConfig, cache: SnapshotCache) -> SourceBundle:
    """Build the configured sources.

    Raises:
        ValueError: If the configured source type is not registered
    """
    source_type = get_source_type(cfg)
    builder = _SOURCE_REGISTRY.get(source_type.lower().strip())
    if builder is None:
        supported = ", ".join(available_sources())
        raise ValueError(f"Unsupported source type: {source_type}. Supported: {supported}")
    return builder(cfg, cache)
