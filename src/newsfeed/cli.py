"""CLI entry point."""

from __future__ import annotations

import asyncio
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from newsfeed.models.page import PaginationStyle

app = typer.Typer(
    name="newsfeed",
    help="Paginated news feed client",
    no_args_is_help=True,
)
console = Console()


@app.command()
def version() -> None:
    """Show version."""
    from newsfeed import __version__

    console.print(f"newsfeed {__version__}")


@app.command()
def fetch(
    pages: int = typer.Option(1, "--pages", "-n", min=1, help="Pages to load (first page plus load-more)"),
    base_url: Optional[str] = typer.Option(None, "--base-url", help="Feed service base URL"),
    style: Optional[PaginationStyle] = typer.Option(None, "--style", help="Pagination idiom of the endpoint"),
    page_size: Optional[int] = typer.Option(None, "--page-size", min=1, help="Items per page"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level"),
) -> None:
    """Load the feed and print it."""
    from newsfeed.composition import build_feed
    from newsfeed.core.config import get_settings
    from newsfeed.core.logging import configure_logging

    overrides = {
        "base_url": base_url,
        "pagination_style": style,
        "page_size": page_size,
        "log_level": log_level,
    }
    settings = get_settings(**{k: v for k, v in overrides.items() if v is not None})
    configure_logging(settings.log_level, settings.log_format)

    feed_app = build_feed(settings)
    ok = asyncio.run(_run(feed_app, pages))
    if not ok:
        raise typer.Exit(code=1)


async def _run(feed_app, pages: int) -> bool:
    from newsfeed.presentation.state import Error
    from newsfeed.presentation.view import FeedItemView

    async with feed_app:
        feed = feed_app.feed
        await feed.load()
        if isinstance(feed.state, Error):
            console.print(f"[red]{feed.error_message}[/red]")
            return False

        for _ in range(pages - 1):
            if not feed.has_more_pages:
                break
            await feed.load_more()
            if feed.pagination_error:
                console.print(f"[yellow]{feed.pagination_error}[/yellow]")
                feed.dismiss_pagination_error()
                break

        table = Table(title=f"News (page {feed.current_page})")
        table.add_column("#", justify="right")
        table.add_column("Title")
        table.add_column("Source")
        table.add_column("Published")
        for index, item in enumerate(feed.items, start=1):
            view = FeedItemView.from_item(item)
            table.add_row(str(index), view.title, view.source, view.formatted_date)
        console.print(table)
        if feed.has_more_pages:
            console.print("[dim]More pages available[/dim]")
    return True


if __name__ == "__main__":
    app()
