"""Shared fixtures: builders for listing response bodies."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import pytest

WireItem = dict[str, Any]


def _wire_item(index: int, **overrides: Any) -> WireItem:
    record: WireItem = {
        "id": f"item-{index}",
        "title": f"Test News {index}",
        "description": f"Description for news {index}",
        "imageURL": f"https://example.com/image{index}.jpg",
        "publishedDate": f"2026-02-13T{index % 24:02d}:00:00Z",
        "source": "Test Source",
        "category": "Technology",
        "author": f"Test Author {index}",
        "tags": ["tech", "news"],
    }
    record.update(overrides)
    return record


def _total_pages_body(
    page: int,
    total_pages: int,
    items: list[WireItem],
    total_items: int | None = None,
) -> bytes:
    return json.dumps(
        {
            "page": page,
            "totalPages": total_pages,
            "totalItems": total_items if total_items is not None else len(items) * total_pages,
            "items": items,
        }
    ).encode()


def _has_next_page_body(page: int, has_next: bool, items: list[WireItem]) -> bytes:
    return json.dumps(
        {
            "page": page,
            "pageSize": len(items) or 10,
            "totalCount": 100,
            "hasNextPage": has_next,
            "items": items,
        }
    ).encode()


@pytest.fixture
def wire_item() -> Callable[..., WireItem]:
    """Builder for one wire item record."""
    return _wire_item


@pytest.fixture
def total_pages_body() -> Callable[..., bytes]:
    """Builder for page/totalPages/totalItems bodies."""
    return _total_pages_body


@pytest.fixture
def has_next_page_body() -> Callable[..., bytes]:
    """Builder for page/pageSize/totalCount/hasNextPage bodies."""
    return _has_next_page_body


@pytest.fixture
def ten_items() -> list[WireItem]:
    """Ten valid wire items, ids item-1 .. item-10."""
    return [_wire_item(i) for i in range(1, 11)]
