#!/usr/bin/env python3
"""
newsfeed Quickstart Example

Shows the basic flow: load the first page, scroll for more, recover from a
failed page.

Usage:
    NEWSFEED_BASE_URL=https://news.example.com python examples/01_quickstart.py
"""

import asyncio

from newsfeed import FeedItemView, build_feed, get_settings
from newsfeed.core.logging import configure_logging


async def main() -> None:
    """Load two pages of the feed and print them."""
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format)

    async with build_feed(settings) as app:
        feed = app.feed
        feed.subscribe(lambda state: print(f"· state -> {state.kind}"))

        await feed.load()
        if feed.error_message:
            print(f"✗ {feed.error_message}")
            return

        print(f"✓ Page 1: {len(feed.items)} items, more pages: {feed.has_more_pages}")

        await feed.load_more()
        if feed.pagination_error:
            print(f"✗ {feed.pagination_error} (still showing {len(feed.items)} items)")
            feed.dismiss_pagination_error()
        else:
            print(f"✓ Page {feed.current_page}: {len(feed.items)} items total")

        for item in feed.items[:5]:
            view = FeedItemView.from_item(item)
            print(f"  {view.formatted_date:>16}  {view.title}")


if __name__ == "__main__":
    asyncio.run(main())
