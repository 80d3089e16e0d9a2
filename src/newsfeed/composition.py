"""Wiring of the feed components.

Components are built once, in dependency order, and handed to each other
through their constructors:

    Transport -> Repository -> PaginationUseCase -> FeedStateMachine

Example:
    >>> from newsfeed.composition import build_feed
    >>> from newsfeed.core.config import get_settings
    >>>
    >>> async with build_feed(get_settings(page_size=20)) as app:
    ...     await app.feed.load()
    ...     print(len(app.feed.items))
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from newsfeed.core.config import Settings, get_settings
from newsfeed.http.client import HttpTransport
from newsfeed.http.endpoint import FeedEndpoint
from newsfeed.mapper.json import mapper_for
from newsfeed.presentation.feed import FeedStateMachine
from newsfeed.protocols.navigation import Navigator
from newsfeed.protocols.transport import Transport
from newsfeed.repository import HttpNewsRepository
from newsfeed.usecase.pagination import PaginationUseCase

logger = logging.getLogger(__name__)


@dataclass
class FeedApp:
    """The wired components of one feed."""

    settings: Settings
    transport: Transport
    repository: HttpNewsRepository
    use_case: PaginationUseCase
    feed: FeedStateMachine

    async def aclose(self) -> None:
        """Release the transport if it owns a connection pool."""
        if isinstance(self.transport, HttpTransport):
            await self.transport.close()

    async def __aenter__(self) -> FeedApp:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()


def build_feed(
    settings: Settings | None = None,
    *,
    transport: Transport | None = None,
    navigator: Navigator | None = None,
) -> FeedApp:
    """Build the feed components from settings.

    Args:
        settings: Configuration (default: from environment).
        transport: Transport override (default: HttpTransport).
        navigator: Navigator override (default: LoggingNavigator).

    Returns:
        The wired components.
    """
    settings = settings or get_settings()

    if transport is None:
        transport = HttpTransport(timeout=settings.request_timeout, user_agent=settings.user_agent)

    endpoint = FeedEndpoint(
        url=settings.feed_url,
        page_param=settings.page_param,
        page_size_param=settings.page_size_param,
    )
    repository = HttpNewsRepository(
        transport=transport,
        mapper=mapper_for(settings.pagination_style),
        endpoint=endpoint,
    )
    use_case = PaginationUseCase(repository, page_size=settings.page_size)
    feed = FeedStateMachine(use_case, navigator=navigator)

    logger.debug(f"Feed wired for {settings.feed_url} ({settings.pagination_style.value})")
    return FeedApp(
        settings=settings,
        transport=transport,
        repository=repository,
        use_case=use_case,
        feed=feed,
    )
