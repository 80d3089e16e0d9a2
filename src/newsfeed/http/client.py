"""HTTP transport backed by httpx.

Sends exactly one request per call and reports failures as
:class:`~newsfeed.core.exceptions.TransportFailure`. There is no retry and no
rate limiting here; a failed call is the caller's to handle.

Example:
    >>> from newsfeed.http import HttpTransport, FeedEndpoint
    >>>
    >>> async with HttpTransport(timeout=10.0) as transport:
    ...     endpoint = FeedEndpoint(url="https://news.example.com/feed")
    ...     response = await transport.send(endpoint.page_request(1))
    ...     response.status_code
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import httpx

from newsfeed.core.exceptions import TransportFailure, TransportFailureKind
from newsfeed.http.endpoint import RawResponse, Request

logger = logging.getLogger(__name__)


class HttpTransport:
    """Async HTTP transport.

    The underlying ``httpx.AsyncClient`` is created lazily and reused until
    :meth:`close`. Pass ``transport`` to route requests through an
    ``httpx.MockTransport`` in tests.

    Attributes:
        timeout: Request timeout in seconds
        user_agent: User-Agent header value
    """

    def __init__(
        self,
        timeout: float = 30.0,
        user_agent: str = "newsfeed/1.0",
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            timeout: Request timeout, enforced by httpx
            user_agent: User-Agent header
            headers: Additional default headers
            transport: Optional httpx transport override
        """
        self._timeout = timeout
        self._user_agent = user_agent
        self._extra_headers = headers or {}
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def timeout(self) -> float:
        """Request timeout in seconds."""
        return self._timeout

    @property
    def user_agent(self) -> str:
        """User-Agent header value."""
        return self._user_agent

    @property
    def headers(self) -> dict[str, str]:
        """Default headers for requests."""
        return {
            "User-Agent": self._user_agent,
            "Accept": "application/json",
            **self._extra_headers,
        }

    def _ensure_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                headers=self.headers,
                timeout=httpx.Timeout(self._timeout),
                follow_redirects=True,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def __aenter__(self) -> HttpTransport:
        self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def send(self, request: Request) -> RawResponse:
        """Perform a single request attempt.

        Args:
            request: Method, URL, headers and query parameters

        Returns:
            Raw response with a 2xx status

        Raises:
            TransportFailure: On connectivity problems, timeouts, malformed
                URLs, or a status outside 200-299
        """
        client = self._ensure_client()
        logger.debug(f"{request.method} {request.url} params={dict(request.query)}")

        try:
            response = await client.request(
                request.method,
                request.url,
                headers=dict(request.headers),
                params=dict(request.query),
            )
        except httpx.TimeoutException as e:
            raise TransportFailure(
                TransportFailureKind.TIMEOUT, f"Request timeout: {e}", cause=e
            ) from e
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as e:
            raise TransportFailure(
                TransportFailureKind.MALFORMED_URL, f"Invalid URL {request.url!r}: {e}", cause=e
            ) from e
        except httpx.RequestError as e:
            raise TransportFailure(
                TransportFailureKind.CONNECTIVITY, f"Request failed: {e}", cause=e
            ) from e

        raw = RawResponse(
            status_code=response.status_code,
            body=response.content,
            headers=dict(response.headers),
        )
        logger.debug(f"Response {raw.status_code} ({len(raw.body)} bytes) from {request.url}")

        if not raw.is_success:
            raise TransportFailure.non_2xx(raw.status_code)
        return raw


@asynccontextmanager
async def http_transport(**kwargs: Any) -> AsyncIterator[HttpTransport]:
    """Context manager for an HTTP transport.

    Example:
        >>> async with http_transport(timeout=5.0) as transport:
        ...     response = await transport.send(request)
    """
    transport = HttpTransport(**kwargs)
    try:
        async with transport:
            yield transport
    finally:
        await transport.close()


__all__ = [
    "HttpTransport",
    "http_transport",
]
