"""JSON listing mappers, one per pagination idiom.

``TotalPagesMapper`` reads::

    {"page": 1, "totalPages": 5, "totalItems": 48, "items": [...]}

``HasNextPageMapper`` reads::

    {"page": 1, "pageSize": 10, "totalCount": 48, "hasNextPage": true, "items": [...]}

A deployment picks one with :func:`mapper_for`.

Example:
    >>> from newsfeed.mapper.json import mapper_for
    >>> from newsfeed.models.page import PaginationStyle
    >>> page = mapper_for(PaginationStyle.TOTAL_PAGES).decode(
    ...     b'{"page": 1, "totalPages": 3, "totalItems": 0, "items": []}'
    ... )
    >>> page.has_more_pages
    True
"""

from __future__ import annotations

from pydantic import Field

from newsfeed.mapper.base import BasePageMapper, WireItem, WireModel
from newsfeed.models.item import FeedItem
from newsfeed.models.page import Page, PaginationStyle


class TotalPagesEnvelope(WireModel):
    page: int
    total_pages: int = Field(alias="totalPages")
    total_items: int | None = Field(default=None, alias="totalItems")
    items: list[WireItem]


class HasNextPageEnvelope(WireModel):
    page: int
    page_size: int | None = Field(default=None, alias="pageSize")
    total_count: int | None = Field(default=None, alias="totalCount")
    has_next_page: bool = Field(alias="hasNextPage")
    items: list[WireItem]


class TotalPagesMapper(BasePageMapper):
    """Mapper for ``page``/``totalPages``/``totalItems`` responses."""

    envelope = TotalPagesEnvelope

    def _to_page(self, envelope: TotalPagesEnvelope, items: tuple[FeedItem, ...]) -> Page:
        return Page(
            items=items,
            page_number=envelope.page,
            total_pages=envelope.total_pages,
            total_items=envelope.total_items,
        )


class HasNextPageMapper(BasePageMapper):
    """Mapper for ``page``/``pageSize``/``totalCount``/``hasNextPage`` responses."""

    envelope = HasNextPageEnvelope

    def _to_page(self, envelope: HasNextPageEnvelope, items: tuple[FeedItem, ...]) -> Page:
        return Page(
            items=items,
            page_number=envelope.page,
            has_next_page=envelope.has_next_page,
            total_items=envelope.total_count,
            page_size=envelope.page_size,
        )


_MAPPERS: dict[PaginationStyle, type[BasePageMapper]] = {
    PaginationStyle.TOTAL_PAGES: TotalPagesMapper,
    PaginationStyle.HAS_NEXT_PAGE: HasNextPageMapper,
}


def mapper_for(style: PaginationStyle | str) -> BasePageMapper:
    """Create the mapper for a pagination idiom."""
    return _MAPPERS[PaginationStyle(style)]()
