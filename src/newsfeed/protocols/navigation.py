"""Navigation protocol.

The feed state machine forwards item selection to a navigator; what happens
next (detail screen, browser, logging) is the navigator's business.

Example:
    >>> from newsfeed.protocols.navigation import Navigator
    >>> hasattr(Navigator, "select_item")
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from newsfeed.models.item import FeedItem


@runtime_checkable
class Navigator(Protocol):
    """Receives item selections from the feed."""

    def select_item(self, item: FeedItem) -> None:
        """Navigate to the detail of ``item``."""
        ...
