"""Display-ready view of a feed item.

Example:
    >>> from datetime import UTC, datetime, timedelta
    >>> from newsfeed.presentation.view import format_relative
    >>> now = datetime(2026, 2, 13, 12, 0, tzinfo=UTC)
    >>> format_relative(now - timedelta(minutes=5), now=now)
    '5 minutes ago'
    >>> format_relative(now - timedelta(days=30), now=now, tz=UTC)
    'Jan 14, 2026'
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, tzinfo
from urllib.parse import urlsplit

from newsfeed.models.item import FeedItem

MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR
WEEK = 7 * DAY


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'} ago"


def format_relative(
    moment: datetime, now: datetime | None = None, tz: tzinfo | None = None
) -> str:
    """Format ``moment`` relative to ``now``.

    Under a minute is "Just now"; then minutes, hours and days. From a week
    on, the calendar date ("Feb 13, 2026") as seen in ``tz``, which defaults
    to the local time zone of the machine.
    """
    now = now or datetime.now(UTC)
    elapsed = (now - moment).total_seconds()

    if elapsed < MINUTE:
        return "Just now"
    if elapsed < HOUR:
        return _plural(int(elapsed // MINUTE), "minute")
    if elapsed < DAY:
        return _plural(int(elapsed // HOUR), "hour")
    if elapsed < WEEK:
        return _plural(int(elapsed // DAY), "day")
    local = moment.astimezone(tz)
    return f"{local:%b} {local.day:02d}, {local.year}"


def _web_url(value: str | None) -> str | None:
    if not value:
        return None
    parts = urlsplit(value)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        return None
    return value


@dataclass(frozen=True)
class FeedItemView:
    """Presentation model for a FeedItem."""

    id: str
    title: str
    description: str
    url: str | None
    image_url: str | None
    formatted_date: str
    source: str
    category: str | None
    author: str | None
    tags: tuple[str, ...]

    @classmethod
    def from_item(
        cls, item: FeedItem, now: datetime | None = None, tz: tzinfo | None = None
    ) -> FeedItemView:
        return cls(
            id=item.id,
            title=item.title,
            description=item.description,
            url=_web_url(item.canonical_url),
            image_url=_web_url(item.image_url),
            formatted_date=format_relative(item.published_at, now=now, tz=tz),
            source=item.source,
            category=item.category,
            author=item.author,
            tags=item.tags,
        )
