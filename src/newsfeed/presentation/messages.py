"""User-facing messages for repository failures."""

from __future__ import annotations

from newsfeed.core.exceptions import RepositoryFailure, RepositoryFailureKind


def user_message(failure: RepositoryFailure) -> str:
    """Return the message shown to the user for ``failure``.

    Example:
        >>> from newsfeed.core.exceptions import RepositoryFailure
        >>> user_message(RepositoryFailure.server(503))
        'Server error (503). Please try again later.'
    """
    if failure.kind is RepositoryFailureKind.NETWORK:
        return "Network connection failed. Please check your connection and try again."
    if failure.kind is RepositoryFailureKind.DECODING:
        return "Unable to process server response. Please try again later."
    if failure.kind is RepositoryFailureKind.SERVER:
        return f"Server error ({failure.status_code}). Please try again later."
    return failure.message or "Something went wrong. Please try again."
