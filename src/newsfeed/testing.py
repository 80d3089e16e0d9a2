"""Testing utilities.

In-memory collaborators for exercising the use case and the feed state
machine without a network.

Example:
    >>> from newsfeed.testing import FakeRepository, make_page
    >>> repository = FakeRepository([make_page(1, total_pages=3, item_count=2)])
    >>> [item.id for item in repository.responses[0].items]
    ['item-1', 'item-2']
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

from newsfeed.models.item import FeedItem
from newsfeed.models.page import Page

BASE_TIME = datetime(2026, 2, 13, 12, 0, tzinfo=UTC)


def make_item(index: int, **overrides: object) -> FeedItem:
    """Build a FeedItem numbered ``index``."""
    fields: dict[str, object] = {
        "id": f"item-{index}",
        "title": f"Test News {index}",
        "description": f"Description for news {index}",
        "canonical_url": f"https://example.com/news/{index}",
        "image_url": f"https://example.com/image{index}.jpg",
        "source": "Test Source",
        "published_at": BASE_TIME - timedelta(minutes=index),
        "author": f"Test Author {index}",
        "category": "Technology",
        "tags": ("tech", "news"),
    }
    fields.update(overrides)
    return FeedItem(**fields)


def make_page(
    page_number: int,
    *,
    total_pages: int | None = None,
    has_next_page: bool | None = None,
    item_count: int = 10,
) -> Page:
    """Build a page whose item ids continue from the previous pages.

    With neither ``total_pages`` nor ``has_next_page`` given, the page is
    the last one.
    """
    if total_pages is None and has_next_page is None:
        total_pages = page_number
    first = (page_number - 1) * item_count + 1
    return Page(
        items=tuple(make_item(i) for i in range(first, first + item_count)),
        page_number=page_number,
        total_pages=total_pages,
        has_next_page=has_next_page,
        total_items=None if total_pages is None else total_pages * item_count,
    )


@dataclass
class FakeRepository:
    """Repository returning queued pages or raising queued exceptions.

    Args:
        responses: Consumed in order, one per fetch.
        gate: When set, each fetch waits for the event before answering.
    """

    responses: list[Page | BaseException] = field(default_factory=list)
    gate: asyncio.Event | None = None
    calls: list[int] = field(default_factory=list, init=False)
    page_sizes: list[int | None] = field(default_factory=list, init=False)

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def queue(self, *responses: Page | BaseException) -> None:
        self.responses.extend(responses)

    async def fetch_page(self, page_number: int, page_size: int | None = None) -> Page:
        self.calls.append(page_number)
        self.page_sizes.append(page_size)
        if self.gate is not None:
            await self.gate.wait()
        if not self.responses:
            raise AssertionError(f"No response queued for page {page_number}")
        response = self.responses.pop(0)
        if isinstance(response, BaseException):
            raise response
        return response


@dataclass
class RecordingNavigator:
    """Navigator that remembers every selection."""

    selected: list[FeedItem] = field(default_factory=list)

    def select_item(self, item: FeedItem) -> None:
        self.selected.append(item)
