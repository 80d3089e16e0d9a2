"""Transport protocol.

Defines the interface for sending one request to the remote listing.

Example:
    >>> from newsfeed.protocols.transport import Transport
    >>> hasattr(Transport, "send")
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from newsfeed.http.endpoint import RawResponse, Request


@runtime_checkable
class Transport(Protocol):
    """Transport protocol.

    Implementations make a single attempt per call and raise
    ``TransportFailure`` on any failure, including non-2xx statuses.
    """

    async def send(self, request: Request) -> RawResponse:
        """Send the request and return the raw response."""
        ...
