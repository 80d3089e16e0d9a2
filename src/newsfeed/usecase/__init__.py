"""Use cases layered over the repository."""

from newsfeed.usecase.pagination import PaginationUseCase

__all__ = ["PaginationUseCase"]
