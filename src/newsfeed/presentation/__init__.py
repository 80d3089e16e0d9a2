"""Presentation state machine and view models."""

from newsfeed.presentation.feed import FeedStateMachine
from newsfeed.presentation.messages import user_message
from newsfeed.presentation.navigation import LoggingNavigator
from newsfeed.presentation.state import Error, FeedState, Idle, Loaded, Loading, LoadingMore
from newsfeed.presentation.view import FeedItemView, format_relative

__all__ = [
    "Error",
    "FeedItemView",
    "FeedState",
    "FeedStateMachine",
    "Idle",
    "Loaded",
    "Loading",
    "LoadingMore",
    "LoggingNavigator",
    "format_relative",
    "user_message",
]
