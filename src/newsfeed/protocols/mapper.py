"""Page mapper protocol.

Example:
    >>> from newsfeed.protocols.mapper import PageMapper
    >>> hasattr(PageMapper, "decode")
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from newsfeed.models.page import Page


@runtime_checkable
class PageMapper(Protocol):
    """Decodes a raw listing response body into a domain page."""

    def decode(self, raw: bytes) -> Page:
        """Decode ``raw`` or raise ``DecodeFailure``."""
        ...
