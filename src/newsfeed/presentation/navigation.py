"""Default navigator."""

from __future__ import annotations

import logging

from newsfeed.models.item import FeedItem

logger = logging.getLogger(__name__)


class LoggingNavigator:
    """Navigator that only records the selection in the log.

    Used when the embedding application has no detail screen of its own.
    """

    def select_item(self, item: FeedItem) -> None:
        link = item.canonical_url or f"id {item.id}"
        logger.info(f"Navigate to detail for: {item.title} ({link})")
