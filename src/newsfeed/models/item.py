"""Feed item domain model.

Example:
    >>> from datetime import UTC, datetime
    >>> from newsfeed.models.item import FeedItem
    >>> item = FeedItem(
    ...     id="a-1",
    ...     title="Launch",
    ...     description="Rocket goes up",
    ...     canonical_url="https://news.example.com/a-1",
    ...     source="Example Wire",
    ...     published_at=datetime(2026, 2, 13, 9, 30, tzinfo=UTC),
    ... )
    >>> item.author is None
    True
"""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import Field, field_validator

from newsfeed.models.base import NewsFeedModel


class FeedItem(NewsFeedModel):
    """A single news item as shown in the feed."""

    id: str = Field(..., min_length=1, description="Unique item identifier")
    title: str
    description: str
    canonical_url: str | None = Field(default=None, description="Link to the full article")
    image_url: str | None = None
    source: str
    published_at: datetime
    author: str | None = None
    category: str | None = None
    tags: tuple[str, ...] = ()

    @field_validator("published_at")
    @classmethod
    def _ensure_aware(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value
