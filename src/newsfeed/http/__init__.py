"""newsfeed HTTP layer.

Provides the request/response value types, the listing endpoint, and an
httpx-backed transport.

Example:
    >>> from newsfeed.http import FeedEndpoint, HttpTransport
    >>>
    >>> async with HttpTransport() as transport:
    ...     endpoint = FeedEndpoint(url="https://news.example.com/feed")
    ...     response = await transport.send(endpoint.page_request(1))
"""

from newsfeed.http.client import HttpTransport, http_transport
from newsfeed.http.endpoint import FeedEndpoint, RawResponse, Request

__all__ = [
    "FeedEndpoint",
    "HttpTransport",
    "RawResponse",
    "Request",
    "http_transport",
]
