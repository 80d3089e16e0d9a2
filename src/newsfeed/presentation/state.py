"""Feed presentation state.

``FeedState`` is a tagged union; exactly one variant is active at a time::

    Idle -> Loading -> Loaded | Error
    Loaded -> LoadingMore -> Loaded
    Loaded | Error -> Loading

Example:
    >>> from newsfeed.presentation.state import Idle, Loaded
    >>> Idle().kind
    'idle'
    >>> Loaded(items=()).kind
    'loaded'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, TypeAlias

from newsfeed.core.exceptions import RepositoryFailure
from newsfeed.models.item import FeedItem


@dataclass(frozen=True)
class Idle:
    kind: ClassVar[str] = "idle"


@dataclass(frozen=True)
class Loading:
    kind: ClassVar[str] = "loading"


@dataclass(frozen=True)
class Loaded:
    """Items from every successfully fetched page, in order."""

    items: tuple[FeedItem, ...]
    kind: ClassVar[str] = "loaded"


@dataclass(frozen=True)
class LoadingMore:
    """The next page is being fetched; ``items`` stay visible."""

    items: tuple[FeedItem, ...]
    kind: ClassVar[str] = "loading_more"


@dataclass(frozen=True)
class Error:
    """Initial load or refresh failed."""

    reason: RepositoryFailure
    kind: ClassVar[str] = "error"


FeedState: TypeAlias = Idle | Loading | Loaded | LoadingMore | Error
