"""Feed state machine.

Owns the presentation state of one feed view and sequences its fetches:
initial load, pull-to-refresh, and infinite-scroll pagination.

All three fetching operations share one in-flight guard, so at most one fetch
is outstanding per instance. A call made while another is outstanding is
ignored, not queued. Run the machine on a single event loop; the guard is a
plain flag, not a lock.

A failed ``load_more`` keeps the items already shown, puts the page cursor
back where it was, and reports the failure through the pagination error
slot instead of the ``Error`` state.

Cancelling the task running a fetch puts the cursor and state back to what
they were before the call, then lets ``CancelledError`` propagate.

Example:
    >>> from newsfeed.presentation.feed import FeedStateMachine
    >>> from newsfeed.usecase import PaginationUseCase
    >>> from newsfeed.testing import FakeRepository, make_page
    >>> import asyncio
    >>> feed = FeedStateMachine(PaginationUseCase(FakeRepository([make_page(1, total_pages=2)])))
    >>> asyncio.run(feed.load())
    >>> feed.state.kind, len(feed.items)
    ('loaded', 10)
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from newsfeed.core.exceptions import RepositoryFailure
from newsfeed.models.item import FeedItem
from newsfeed.presentation.messages import user_message
from newsfeed.presentation.navigation import LoggingNavigator
from newsfeed.presentation.state import (
    Error,
    FeedState,
    Idle,
    Loaded,
    Loading,
    LoadingMore,
)
from newsfeed.protocols.navigation import Navigator
from newsfeed.usecase.pagination import PaginationUseCase

logger = logging.getLogger(__name__)

StateListener = Callable[[FeedState], None]


class FeedStateMachine:
    """State machine behind a paginated feed view.

    Args:
        use_case: Fetches pages and answers "are there more pages".
        navigator: Receives item selections (default: log only).

    Example:
        >>> feed = FeedStateMachine(use_case)
        >>> unsubscribe = feed.subscribe(lambda state: print(state.kind))
        >>> await feed.load()
        loading
        loaded
    """

    def __init__(self, use_case: PaginationUseCase, navigator: Navigator | None = None) -> None:
        self._use_case = use_case
        self._navigator = navigator or LoggingNavigator()

        self._state: FeedState = Idle()
        self._pagination_error: str | None = None
        self._listeners: list[StateListener] = []

        # Cursor
        self._current_page = 0
        self._has_more_pages = True
        self._in_flight = False

    # =========================================================================
    # Observable state
    # =========================================================================

    @property
    def state(self) -> FeedState:
        return self._state

    @property
    def items(self) -> tuple[FeedItem, ...]:
        """Items currently on screen."""
        if isinstance(self._state, (Loaded, LoadingMore)):
            return self._state.items
        return ()

    @property
    def is_loading(self) -> bool:
        return isinstance(self._state, Loading)

    @property
    def is_loading_more(self) -> bool:
        return isinstance(self._state, LoadingMore)

    @property
    def error_message(self) -> str:
        """Message for the full-screen error, empty unless in ``Error``."""
        if isinstance(self._state, Error):
            return user_message(self._state.reason)
        return ""

    @property
    def pagination_error(self) -> str | None:
        """Dismissible notice left by a failed ``load_more``."""
        return self._pagination_error

    @property
    def current_page(self) -> int:
        return self._current_page

    @property
    def has_more_pages(self) -> bool:
        return self._has_more_pages

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Call ``listener`` with the new state after every change.

        Returns:
            Function that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # =========================================================================
    # User intents
    # =========================================================================

    async def load(self) -> None:
        """Load the first page, replacing whatever is shown."""
        await self._load_first_page("load")

    async def refresh(self) -> None:
        """Pull-to-refresh: reload the first page."""
        await self._load_first_page("refresh")

    async def load_more(self) -> None:
        """Fetch the next page and append it to the shown items.

        Does nothing while a fetch is outstanding, when no more pages exist,
        or unless the state is exactly ``Loaded``.
        """
        if self._in_flight:
            logger.debug("load_more skipped: fetch in flight")
            return
        if not self._has_more_pages:
            logger.debug("load_more skipped: no more pages")
            return
        if not isinstance(self._state, Loaded):
            logger.debug(f"load_more skipped: state is {self._state.kind}")
            return

        existing = self._state.items
        self._in_flight = True
        self._current_page += 1
        requested = self._current_page
        self._set_state(LoadingMore(existing))

        failure: RepositoryFailure | None = None
        new_items: tuple[FeedItem, ...] = ()
        has_more = self._has_more_pages
        try:
            new_items = await self._use_case.fetch_page(requested)
            has_more = await self._use_case.has_more_pages(requested)
        except RepositoryFailure as e:
            failure = e
        except Exception as e:
            failure = RepositoryFailure.unknown(str(e) or type(e).__name__, cause=e)
        except asyncio.CancelledError:
            self._in_flight = False
            self._current_page = requested - 1
            logger.info(f"Page {requested} cancelled; cursor back to {self._current_page}")
            self._set_state(Loaded(existing))
            raise
        finally:
            self._in_flight = False

        if failure is not None:
            self._current_page = requested - 1
            self._pagination_error = user_message(failure)
            logger.warning(
                f"Page {requested} failed ({failure.kind.value}); "
                f"keeping {len(existing)} items, cursor back to {self._current_page}"
            )
            self._set_state(Loaded(existing))
            return

        self._has_more_pages = has_more
        merged = _merge(existing, new_items)
        logger.info(f"Page {requested} loaded: {len(merged)} items, more={has_more}")
        self._set_state(Loaded(merged))

    def select_item(self, item: FeedItem) -> None:
        """Forward the selection to the navigator."""
        logger.debug(f"Selected item {item.id!r}")
        self._navigator.select_item(item)

    def dismiss_pagination_error(self) -> None:
        """Clear the pagination error notice."""
        if self._pagination_error is None:
            return
        self._pagination_error = None
        self._notify()

    # =========================================================================
    # Internals
    # =========================================================================

    async def _load_first_page(self, trigger: str) -> None:
        if self._in_flight:
            logger.debug(f"{trigger} skipped: fetch in flight")
            return

        previous_state = self._state
        previous_page = self._current_page
        previous_error = self._pagination_error

        self._in_flight = True
        self._current_page = 1
        self._pagination_error = None
        self._set_state(Loading())

        outcome: FeedState
        try:
            items = await self._use_case.fetch_page(1)
            has_more = await self._use_case.has_more_pages(1)
        except RepositoryFailure as e:
            outcome = Error(e)
        except Exception as e:
            outcome = Error(RepositoryFailure.unknown(str(e) or type(e).__name__, cause=e))
        except asyncio.CancelledError:
            self._in_flight = False
            self._current_page = previous_page
            self._pagination_error = previous_error
            logger.info(f"{trigger} cancelled; back to {previous_state.kind}")
            self._set_state(previous_state)
            raise
        else:
            self._has_more_pages = has_more
            outcome = Loaded(items)
        finally:
            self._in_flight = False

        if isinstance(outcome, Error):
            logger.warning(f"{trigger} failed: {outcome.reason.kind.value}: {outcome.reason}")
        else:
            logger.info(f"{trigger} complete: {len(outcome.items)} items, more={self._has_more_pages}")
        self._set_state(outcome)

    def _set_state(self, state: FeedState) -> None:
        self._state = state
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self._state)
            except Exception:
                logger.exception("Feed state listener failed")


def _merge(existing: tuple[FeedItem, ...], new_items: tuple[FeedItem, ...]) -> tuple[FeedItem, ...]:
    """Append ``new_items``, skipping ids already shown."""
    seen = {item.id for item in existing}
    appended = []
    for item in new_items:
        if item.id in seen:
            continue
        seen.add(item.id)
        appended.append(item)
    if len(appended) != len(new_items):
        logger.debug(f"Skipped {len(new_items) - len(appended)} repeated item(s)")
    return existing + tuple(appended)
