"""Protocol definitions - all extension points."""

from newsfeed.protocols.mapper import PageMapper
from newsfeed.protocols.navigation import Navigator
from newsfeed.protocols.repository import NewsRepository
from newsfeed.protocols.transport import Transport

__all__ = [
    "Navigator",
    "NewsRepository",
    "PageMapper",
    "Transport",
]
