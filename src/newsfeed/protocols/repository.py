"""News repository protocol.

Callers of a repository only ever see ``RepositoryFailure``; transport and
decoding details stay below this seam.

Example:
    >>> from newsfeed.protocols.repository import NewsRepository
    >>> hasattr(NewsRepository, "fetch_page")
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from newsfeed.models.page import Page


@runtime_checkable
class NewsRepository(Protocol):
    """Fetches one page of the feed."""

    async def fetch_page(self, page_number: int, page_size: int | None = None) -> Page:
        """Fetch page ``page_number`` (1-based)."""
        ...
