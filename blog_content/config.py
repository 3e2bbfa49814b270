"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- SourceConfig: Backing store selection and content file layout
- CacheConfig: Reference-collection cache TTL
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from typing import Any

import yaml


@dataclass
class SourceConfig:
    """Configuration for the backing content store.

    Attributes:
        type: Store name ("json"); None defers to the environment variable in type_env
        type_env: Environment variable consulted when type is not set
        content_dir: Root directory holding the content files
        articles_dir: Article records directory, relative to content_dir
        authors_file: Authors collection file, relative to content_dir
        categories_file: Categories collection file, relative to content_dir
        extension: File extension recognized as an article record
        on_invalid_record: "skip" to drop malformed records, "fail" to fail the whole collection
        unknown_blocks: "drop" to discard unknown content blocks with a warning, "error" to reject the record
        max_concurrent_reads: Upper bound on simultaneous record file reads
    """

    type: str | None = None
    type_env: str = "BLOG_SOURCE_TYPE"
    content_dir: str = "content"
    articles_dir: str = "articles"
    authors_file: str = "authors/authors.json"
    categories_file: str = "categories/categories.json"
    extension: str = ".json"
    on_invalid_record: str = "skip"
    unknown_blocks: str = "drop"
    max_concurrent_reads: int = 8


@dataclass
class CacheConfig:
    """Configuration for the author/category snapshot cache.

    Attributes:
        ttl_seconds: Seconds a cached collection stays fresh
    """

    ttl_seconds: float = 300.0


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to console
        file: Whether to log to file
        format: Log file format ("jsonl" or "plain")
        filename: Name of the log file
    """

    level: str = "WARNING"
    console: bool = True
    file: bool = False
    format: str = "jsonl"
    filename: str = "blog_content.jsonl"


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    source: SourceConfig = field(default_factory=SourceConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults."""
    if not path:
        return AppConfig()

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    return _merge_config(AppConfig(), raw)


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig."""
    data = _asdict(base)
    for key, value in raw.items():
        if key not in data or value is None:
            continue
        if isinstance(value, dict) and isinstance(data[key], dict):
            data[key].update(value)
        else:
            data[key] = value
    return _fromdict(data)


def _asdict(cfg: AppConfig) -> dict[str, Any]:
    """Convert AppConfig to nested dictionary."""
    return {
        "source": {
            "type": cfg.source.type,
            "type_env": cfg.source.type_env,
            "content_dir": cfg.source.content_dir,
            "articles_dir": cfg.source.articles_dir,
            "authors_file": cfg.source.authors_file,
            "categories_file": cfg.source.categories_file,
            "extension": cfg.source.extension,
            "on_invalid_record": cfg.source.on_invalid_record,
            "unknown_blocks": cfg.source.unknown_blocks,
            "max_concurrent_reads": cfg.source.max_concurrent_reads,
        },
        "cache": {
            "ttl_seconds": cfg.cache.ttl_seconds,
        },
        "logging": {
            "level": cfg.logging.level,
            "console": cfg.logging.console,
            "file": cfg.logging.file,
            "format": cfg.logging.format,
            "filename": cfg.logging.filename,
        },
    }


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    return AppConfig(
        source=SourceConfig(**data["source"]),
        cache=CacheConfig(**data["cache"]),
        logging=LoggingConfig(**data["logging"]),
    )


def get_source_type(cfg: SourceConfig) -> str:
    """Get the store name from inline config, the environment, or the default."""
    if cfg.type:
        return cfg.type
    return os.getenv(cfg.type_env) or "json"
