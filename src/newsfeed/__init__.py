"""
newsfeed - Paginated News Feed Client.

A client-side data layer for a paginated news feed: fetches pages from a
remote listing, maps wire records into domain items, and drives the feed's
presentation state through initial load, pull-to-refresh and infinite
scroll.

Layers:
    Transport: HttpTransport (httpx)
    Mapper: TotalPagesMapper, HasNextPageMapper
    Repository: HttpNewsRepository
    Use case: PaginationUseCase
    Presentation: FeedStateMachine

Quick Start:
    >>> from newsfeed import build_feed, get_settings
    >>> async with build_feed(get_settings()) as app:
    ...     await app.feed.load()
    ...     await app.feed.load_more()
"""

from newsfeed.composition import FeedApp, build_feed
from newsfeed.core.config import Settings, get_settings
from newsfeed.core.exceptions import (
    DecodeFailure,
    DecodeFailureKind,
    NewsFeedError,
    RepositoryFailure,
    RepositoryFailureKind,
    TransportFailure,
    TransportFailureKind,
)
from newsfeed.http import FeedEndpoint, HttpTransport, RawResponse, Request
from newsfeed.mapper import HasNextPageMapper, TotalPagesMapper, mapper_for
from newsfeed.models import FeedItem, Page, PaginationStyle
from newsfeed.presentation import (
    Error,
    FeedItemView,
    FeedState,
    FeedStateMachine,
    Idle,
    Loaded,
    Loading,
    LoadingMore,
    LoggingNavigator,
)
from newsfeed.repository import HttpNewsRepository
from newsfeed.usecase import PaginationUseCase

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Composition
    "FeedApp",
    "build_feed",
    "Settings",
    "get_settings",
    # Models
    "FeedItem",
    "Page",
    "PaginationStyle",
    # Transport
    "FeedEndpoint",
    "HttpTransport",
    "RawResponse",
    "Request",
    # Mapping
    "HasNextPageMapper",
    "TotalPagesMapper",
    "mapper_for",
    # Repository / use case
    "HttpNewsRepository",
    "PaginationUseCase",
    # Presentation
    "Error",
    "FeedItemView",
    "FeedState",
    "FeedStateMachine",
    "Idle",
    "Loaded",
    "Loading",
    "LoadingMore",
    "LoggingNavigator",
    # Errors
    "DecodeFailure",
    "DecodeFailureKind",
    "NewsFeedError",
    "RepositoryFailure",
    "RepositoryFailureKind",
    "TransportFailure",
    "TransportFailureKind",
]
