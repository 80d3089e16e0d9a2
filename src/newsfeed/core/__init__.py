"""Core configuration, logging and exceptions."""

from newsfeed.core.config import Settings, get_settings
from newsfeed.core.exceptions import (
    ConfigurationError,
    DecodeFailure,
    DecodeFailureKind,
    NewsFeedError,
    RepositoryFailure,
    RepositoryFailureKind,
    TransportFailure,
    TransportFailureKind,
)
from newsfeed.core.logging import configure_logging

__all__ = [
    # Configuration
    "Settings",
    "get_settings",
    "configure_logging",
    # Exceptions
    "ConfigurationError",
    "DecodeFailure",
    "DecodeFailureKind",
    "NewsFeedError",
    "RepositoryFailure",
    "RepositoryFailureKind",
    "TransportFailure",
    "TransportFailureKind",
]
