"""Custom exceptions.

newsfeed uses a hierarchy of exceptions, one per layer, each tagged with a
``kind`` so callers can branch without string matching:

    TransportFailure  (connectivity / timeout / malformed-url / non-2xx)
        -> RepositoryFailure  (network / decoding / server / unknown)
    DecodeFailure     (missing-field / type-mismatch / malformed)
        -> RepositoryFailure.decoding

Example:
    >>> from newsfeed.core.exceptions import RepositoryFailure, NewsFeedError
    >>> err = RepositoryFailure.server(500)
    >>> isinstance(err, NewsFeedError)
    True
    >>> err.status_code
    500
"""

from __future__ import annotations

from enum import Enum


class NewsFeedError(Exception):
    """Base exception for newsfeed.

    Example:
        >>> from newsfeed.core.exceptions import NewsFeedError
        >>> e = NewsFeedError("something went wrong")
        >>> str(e)
        'something went wrong'
    """


class ConfigurationError(NewsFeedError):
    """Configuration is invalid."""


# =============================================================================
# Transport
# =============================================================================


class TransportFailureKind(str, Enum):
    """Why a single request attempt failed."""

    CONNECTIVITY = "connectivity"
    TIMEOUT = "timeout"
    MALFORMED_URL = "malformed_url"
    NON_2XX = "non_2xx"


class TransportFailure(NewsFeedError):
    """A request could not be completed or returned a non-2xx status.

    Example:
        >>> from newsfeed.core.exceptions import TransportFailure, TransportFailureKind
        >>> err = TransportFailure.non_2xx(503)
        >>> err.kind is TransportFailureKind.NON_2XX, err.status_code
        (True, 503)
    """

    def __init__(
        self,
        kind: TransportFailureKind,
        message: str,
        *,
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.status_code = status_code
        self.cause = cause

    @classmethod
    def non_2xx(cls, status_code: int) -> TransportFailure:
        return cls(
            TransportFailureKind.NON_2XX,
            f"HTTP {status_code}",
            status_code=status_code,
        )


# =============================================================================
# Decoding
# =============================================================================


class DecodeFailureKind(str, Enum):
    """Why a response body could not be mapped into a page."""

    MISSING_FIELD = "missing_field"
    TYPE_MISMATCH = "type_mismatch"
    MALFORMED = "malformed"


class DecodeFailure(NewsFeedError):
    """The response body does not have the expected shape."""

    def __init__(
        self,
        kind: DecodeFailureKind,
        message: str,
        *,
        field: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.field = field
        self.cause = cause


# =============================================================================
# Repository
# =============================================================================


class RepositoryFailureKind(str, Enum):
    """Error taxonomy seen by everything above the repository."""

    NETWORK = "network"
    DECODING = "decoding"
    SERVER = "server"
    UNKNOWN = "unknown"


class RepositoryFailure(NewsFeedError):
    """Fetching a page failed.

    Build instances through the named constructors so the kind, status code
    and cause stay consistent.

    Example:
        >>> from newsfeed.core.exceptions import RepositoryFailure
        >>> RepositoryFailure.unknown("boom").kind.value
        'unknown'
    """

    def __init__(
        self,
        kind: RepositoryFailureKind,
        message: str,
        *,
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.status_code = status_code
        self.cause = cause

    @property
    def message(self) -> str:
        return str(self)

    @classmethod
    def network(cls, cause: TransportFailure) -> RepositoryFailure:
        return cls(RepositoryFailureKind.NETWORK, str(cause), cause=cause)

    @classmethod
    def decoding(cls, cause: DecodeFailure) -> RepositoryFailure:
        return cls(RepositoryFailureKind.DECODING, str(cause), cause=cause)

    @classmethod
    def server(cls, status_code: int) -> RepositoryFailure:
        return cls(
            RepositoryFailureKind.SERVER,
            f"Server responded with status {status_code}",
            status_code=status_code,
        )

    @classmethod
    def unknown(cls, message: str, cause: Exception | None = None) -> RepositoryFailure:
        return cls(RepositoryFailureKind.UNKNOWN, message, cause=cause)

    def __repr__(self) -> str:
        return f"RepositoryFailure(kind={self.kind.value!r}, message={str(self)!r})"
