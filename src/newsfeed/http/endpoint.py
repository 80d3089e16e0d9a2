"""Request description for the paginated listing endpoint.

Example:
    >>> from newsfeed.http.endpoint import FeedEndpoint
    >>> endpoint = FeedEndpoint(url="https://news.example.com/feed")
    >>> request = endpoint.page_request(2, page_size=20)
    >>> request.method, request.query
    ('GET', {'page': '2', 'pageSize': '20'})
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from collections.abc import Mapping

DEFAULT_HEADERS: Mapping[str, str] = MappingProxyType({"Content-Type": "application/json"})


@dataclass(frozen=True)
class Request:
    """One HTTP request: method, absolute URL, headers and query parameters."""

    method: str
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    query: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class RawResponse:
    """Undecoded response as returned by a transport."""

    status_code: int
    body: bytes
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code <= 299


@dataclass(frozen=True)
class FeedEndpoint:
    """Builds requests for "page N" of the listing.

    Args:
        url: Absolute URL of the listing.
        page_param: Query parameter carrying the page number.
        page_size_param: Query parameter carrying the page size.
        headers: Extra headers merged over the defaults.
    """

    url: str
    page_param: str = "page"
    page_size_param: str = "pageSize"
    headers: Mapping[str, str] = field(default_factory=dict)

    def page_request(self, page_number: int, page_size: int | None = None) -> Request:
        query = {self.page_param: str(page_number)}
        if page_size is not None:
            query[self.page_size_param] = str(page_size)
        return Request(
            method="GET",
            url=self.url,
            headers={**DEFAULT_HEADERS, **self.headers},
            query=query,
        )
