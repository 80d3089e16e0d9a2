"""Page of feed items plus pagination metadata.

Two pagination idioms exist for the listing endpoint; a deployment uses one
of them consistently:

- ``TOTAL_PAGES``: ``page`` / ``totalPages`` / ``totalItems``
- ``HAS_NEXT_PAGE``: ``page`` / ``pageSize`` / ``totalCount`` / ``hasNextPage``

Example:
    >>> from newsfeed.models.page import Page
    >>> Page(items=(), page_number=2, total_pages=5).has_more_pages
    True
    >>> Page(items=(), page_number=3, has_next_page=False).has_more_pages
    False
"""

from __future__ import annotations

from enum import Enum

from pydantic import Field, model_validator

from newsfeed.models.base import NewsFeedModel
from newsfeed.models.item import FeedItem


class PaginationStyle(str, Enum):
    """Shape of the pagination metadata returned by the endpoint."""

    TOTAL_PAGES = "total_pages"
    HAS_NEXT_PAGE = "has_next_page"


class Page(NewsFeedModel):
    """One fetch result. ``items`` keeps wire order."""

    items: tuple[FeedItem, ...] = ()
    page_number: int = Field(..., ge=1)
    total_pages: int | None = Field(default=None, ge=0)
    has_next_page: bool | None = None
    total_items: int | None = Field(default=None, ge=0)
    page_size: int | None = Field(default=None, ge=1)

    @model_validator(mode="after")
    def _check_pagination(self) -> Page:
        if self.total_pages is None and self.has_next_page is None:
            raise ValueError("page needs either total_pages or has_next_page")
        # total_pages == 0 is an empty feed still served as page 1
        if self.total_pages and self.page_number > self.total_pages:
            raise ValueError(
                f"page_number {self.page_number} exceeds total_pages {self.total_pages}"
            )
        return self

    @property
    def has_more_pages(self) -> bool:
        """Whether a page after this one exists."""
        if self.total_pages is not None:
            return self.page_number < self.total_pages
        return bool(self.has_next_page)
