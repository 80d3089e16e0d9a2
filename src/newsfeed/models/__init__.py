"""Domain models."""

from newsfeed.models.base import NewsFeedModel
from newsfeed.models.item import FeedItem
from newsfeed.models.page import Page, PaginationStyle

__all__ = [
    "FeedItem",
    "NewsFeedModel",
    "Page",
    "PaginationStyle",
]
