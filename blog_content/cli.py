"""
Command-line interface for inspecting blog content.

Uses Typer to expose the BlogService queries against a content
directory. Supports loading .env files for source selection.
"""

from __future__ import annotations

from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from .config import load_config
from .core.content import ListGroup, RenderUnit, normalize_blocks
from .core.types import ArticleMetadata, CodeBlock, Heading, Quote
from .service import BlogService, create_blog_service
from .utils.formatting import format_date, truncate
from .utils.logging import setup_logging

app = typer.Typer(add_completion=False, help="Inspect blog articles, authors and categories.")
console = Console()

_state: dict[str, BlogService] = {}


@app.callback()
def main(
    config: Path | None = typer.Option(None, "--config", "-c", exists=True, help="YAML config file."),
    content_dir: Path | None = typer.Option(None, "--content-dir", help="Content root directory."),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
):
    """Load configuration and build the blog service."""
    load_dotenv()

    cfg = load_config(str(config) if config else None)
    if content_dir is not None:
        cfg.source.content_dir = str(content_dir)
    if log_level:
        cfg.logging.level = log_level

    setup_logging(cfg.logging, Path("."))
    _state["service"] = create_blog_service(cfg)


def _service() -> BlogService:
    return _state["service"]


@app.command("list")
def list_articles(
    tag: str | None = typer.Option(None, "--tag", help="Only articles with this tag."),
    category: str | None = typer.Option(None, "--category", help="Only articles in this category id."),
):
    """List article metadata, newest first."""
    service = _service()
    outcome = service.load_articles()
    if outcome.failed:
        for error in outcome.errors:
            console.print(f"[red]Failed to read articles:[/red] {error.path}: {error.message}")
        raise typer.Exit(code=1)

    articles = outcome.items
    if tag:
        articles = [article for article in articles if tag in article.tags]
    if category:
        articles = [article for article in articles if article.category == category]

    _print_table([article.metadata() for article in articles])
    for error in outcome.errors:
        console.print(f"[yellow]Skipped:[/yellow] {error.path}: {error.message}")


@app.command()
def show(slug: str):
    """Show one article with its author and content."""
    service = _service()
    joined = service.get_article_with_author(slug)
    if joined is None:
        console.print(f"[red]Article not found:[/red] {slug}")
        raise typer.Exit(code=1)

    article = joined.article
    console.print(f"[bold]{article.title}[/bold]")
    byline = joined.author.name if joined.author else "Unknown author"
    console.print(f"{byline} · {format_date(article.published_at)} · {article.reading_time} min")
    if article.tags:
        console.print("Tags: " + ", ".join(article.tags))
    console.print()
    for unit in normalize_blocks(article.content):
        console.print(_unit_text(unit), markup=False)
        console.print()


@app.command()
def search(query: str):
    """Search titles, descriptions and tags."""
    _print_table([article.metadata() for article in _service().search_articles(query)])


@app.command()
def related(slug: str, limit: int = typer.Option(3, "--limit", "-n", min=0)):
    """List articles sharing a tag with SLUG."""
    service = _service()
    if service.get_article_by_slug(slug) is None:
        console.print(f"[red]Article not found:[/red] {slug}")
        raise typer.Exit(code=1)
    _print_table([article.metadata() for article in service.get_related_articles(slug, limit)])


@app.command()
def featured(limit: int = typer.Option(3, "--limit", "-n", min=0)):
    """List featured articles."""
    _print_table([article.metadata() for article in _service().get_featured_articles(limit)])


@app.command()
def slugs():
    """Print every article slug, one per line."""
    for params in _service().get_static_slug_params():
        console.print(params["slug"], markup=False)


def _print_table(articles: list[ArticleMetadata]) -> None:
    table = Table(show_lines=False)
    table.add_column("Published")
    table.add_column("Slug")
    table.add_column("Title")
    table.add_column("Tags")
    for meta in articles:
        title = truncate(meta.title, 60)
        if meta.featured:
            title = f"★ {title}"
        table.add_row(format_date(meta.published_at), meta.slug, title, ", ".join(meta.tags))
    console.print(table)
    console.print(f"Total: {len(articles)}")


def _unit_text(unit: RenderUnit) -> str:
    if isinstance(unit, ListGroup):
        if unit.ordered:
            return "\n".join(f"{index}. {item.text}" for index, item in enumerate(unit.items, start=1))
        return "\n".join(f"- {item.text}" for item in unit.items)
    if isinstance(unit, Heading):
        return f"{'#' * unit.level} {unit.text}"
    if isinstance(unit, CodeBlock):
        return f"```{unit.language or 'text'}\n{unit.text}\n```"
    if isinstance(unit, Quote):
        return f"> {unit.text}"
    return unit.text


if __name__ == "__main__":
    app()
