"""Pagination use case.

Adds page bookkeeping on top of a NewsRepository: every successful fetch
overwrites the cached pagination signal, which later answers
:meth:`PaginationUseCase.has_more_pages` without another network call.

Example:
    >>> from newsfeed.usecase import PaginationUseCase
    >>> from newsfeed.testing import FakeRepository, make_page
    >>> import asyncio
    >>> use_case = PaginationUseCase(FakeRepository([make_page(1, total_pages=3)]))
    >>> items = asyncio.run(use_case.fetch_page(1))
    >>> asyncio.run(use_case.has_more_pages(1))
    True
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from newsfeed.core.exceptions import RepositoryFailure
from newsfeed.models.item import FeedItem
from newsfeed.models.page import Page
from newsfeed.protocols.repository import NewsRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PaginationSignal:
    """Last observed pagination metadata."""

    page_number: int
    total_pages: int | None
    has_next_page: bool | None

    @classmethod
    def from_page(cls, page: Page) -> PaginationSignal:
        return cls(page.page_number, page.total_pages, page.has_next_page)

    def has_more_after(self, current_page: int) -> bool:
        if self.total_pages is not None:
            return current_page < self.total_pages
        return bool(self.has_next_page)


class PaginationUseCase:
    """Fetches pages and remembers whether more exist.

    The cached signal belongs to this instance only and is replaced, never
    merged, by each successful fetch.
    """

    def __init__(self, repository: NewsRepository, page_size: int | None = None) -> None:
        self._repository = repository
        self._page_size = page_size
        self._signal: PaginationSignal | None = None

    @property
    def cached_total_pages(self) -> int | None:
        return self._signal.total_pages if self._signal else None

    @property
    def signal(self) -> PaginationSignal | None:
        return self._signal

    async def fetch_page(self, page_number: int) -> tuple[FeedItem, ...]:
        """Fetch a page and cache its pagination signal.

        Raises:
            RepositoryFailure: Unchanged from the repository, or wrapping any
                unexpected exception as ``unknown``.
        """
        page = await self._fetch(page_number)
        logger.debug(f"Fetched {len(page.items)} items for page {page_number}")
        return page.items

    async def has_more_pages(self, current_page: int) -> bool:
        """Whether a page after ``current_page`` exists.

        Uses the cached signal when present; otherwise fetches
        ``current_page`` once to obtain it.
        """
        if self._signal is not None:
            return self._signal.has_more_after(current_page)

        logger.debug(f"No cached pagination signal, fetching page {current_page}")
        page = await self._fetch(current_page)
        return PaginationSignal.from_page(page).has_more_after(current_page)

    async def _fetch(self, page_number: int) -> Page:
        try:
            page = await self._repository.fetch_page(page_number, self._page_size)
        except RepositoryFailure:
            raise
        except Exception as e:
            raise RepositoryFailure.unknown(str(e) or type(e).__name__, cause=e) from e

        self._signal = PaginationSignal.from_page(page)
        return page
