"""HTTP-backed news repository.

Orchestrates a Transport and a PageMapper for one use: fetch page N. Every
lower-level failure is translated 1:1 into a RepositoryFailure:

    ==========================  ===========================
    Cause                       RepositoryFailure kind
    ==========================  ===========================
    connectivity / timeout      network
    non-2xx status              server (status code kept)
    malformed URL               unknown
    DecodeFailure               decoding
    anything else               unknown
    ==========================  ===========================

Example:
    >>> from newsfeed.repository import HttpNewsRepository
    >>> from newsfeed.http import FeedEndpoint, HttpTransport
    >>> from newsfeed.mapper import TotalPagesMapper
    >>> repository = HttpNewsRepository(
    ...     transport=HttpTransport(),
    ...     mapper=TotalPagesMapper(),
    ...     endpoint=FeedEndpoint(url="https://news.example.com/feed"),
    ... )
    >>> # page = await repository.fetch_page(1)
"""

from __future__ import annotations

import logging

from newsfeed.core.exceptions import (
    DecodeFailure,
    RepositoryFailure,
    TransportFailure,
    TransportFailureKind,
)
from newsfeed.http.endpoint import FeedEndpoint
from newsfeed.models.page import Page
from newsfeed.protocols.mapper import PageMapper
from newsfeed.protocols.transport import Transport

logger = logging.getLogger(__name__)


class HttpNewsRepository:
    """Fetches listing pages over a transport and decodes them.

    Args:
        transport: Sends the request (one attempt).
        mapper: Decodes the response body.
        endpoint: Builds the request for a page.
    """

    def __init__(self, transport: Transport, mapper: PageMapper, endpoint: FeedEndpoint) -> None:
        self._transport = transport
        self._mapper = mapper
        self._endpoint = endpoint

    @property
    def endpoint(self) -> FeedEndpoint:
        return self._endpoint

    async def fetch_page(self, page_number: int, page_size: int | None = None) -> Page:
        """Fetch and decode one page.

        Args:
            page_number: 1-based page number.
            page_size: Optional items per page.

        Returns:
            Decoded page.

        Raises:
            ValueError: If page_number < 1 or page_size < 1.
            RepositoryFailure: If the fetch or decode failed.
        """
        if page_number < 1:
            raise ValueError(f"page_number must be >= 1, got {page_number}")
        if page_size is not None and page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {page_size}")

        request = self._endpoint.page_request(page_number, page_size)
        logger.debug(f"Fetching page {page_number}")

        try:
            response = await self._transport.send(request)
            page = self._mapper.decode(response.body)
        except TransportFailure as e:
            logger.warning(f"Transport failure on page {page_number}: {e.kind.value}: {e}")
            raise self._translate_transport(e) from e
        except DecodeFailure as e:
            logger.warning(f"Decode failure on page {page_number}: {e.kind.value}: {e}")
            raise RepositoryFailure.decoding(e) from e
        except Exception as e:
            logger.warning(f"Unexpected failure on page {page_number}: {e!r}")
            raise RepositoryFailure.unknown(str(e) or type(e).__name__, cause=e) from e

        total = page.total_pages if page.total_pages is not None else "?"
        logger.debug(f"Page {page.page_number}/{total}: {len(page.items)} items")
        return page

    @staticmethod
    def _translate_transport(failure: TransportFailure) -> RepositoryFailure:
        if failure.kind is TransportFailureKind.NON_2XX:
            # non_2xx always carries a status code
            return RepositoryFailure.server(failure.status_code or 0)
        if failure.kind is TransportFailureKind.MALFORMED_URL:
            return RepositoryFailure.unknown("Invalid request configuration", cause=failure)
        return RepositoryFailure.network(failure)
