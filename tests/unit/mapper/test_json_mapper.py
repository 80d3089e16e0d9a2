"""Tests for newsfeed.mapper - listing response decoding."""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime

import pytest

from newsfeed.core.exceptions import DecodeFailure, DecodeFailureKind
from newsfeed.mapper import HasNextPageMapper, TotalPagesMapper, mapper_for, parse_timestamp
from newsfeed.models.page import PaginationStyle
from newsfeed.protocols.mapper import PageMapper

# =============================================================================
# Timestamp parsing
# =============================================================================


class TestParseTimestamp:
    def test_iso_with_z(self) -> None:
        assert parse_timestamp("2026-02-13T09:30:00Z") == datetime(2026, 2, 13, 9, 30, tzinfo=UTC)

    def test_iso_with_offset(self) -> None:
        parsed = parse_timestamp("2026-02-13T11:30:00+02:00")
        assert parsed == datetime(2026, 2, 13, 9, 30, tzinfo=UTC)

    def test_naive_iso_is_utc(self) -> None:
        assert parse_timestamp("2026-02-13T09:30:00").tzinfo is UTC

    def test_unix_seconds(self) -> None:
        assert parse_timestamp(0) == datetime(1970, 1, 1, tzinfo=UTC)
        assert parse_timestamp(1771000000.5) == datetime(2026, 2, 13, 16, 26, 40, 500000, tzinfo=UTC)

    def test_unix_seconds_string(self) -> None:
        assert parse_timestamp("1771000000") == datetime(2026, 2, 13, 16, 26, 40, tzinfo=UTC)
        assert parse_timestamp(" 1771000000.25 ") == datetime(
            2026, 2, 13, 16, 26, 40, 250000, tzinfo=UTC
        )

    @pytest.mark.parametrize("value", ["0", "2026", "-1771000000", "1e9", "nan"])
    def test_short_numeric_string_is_not_a_timestamp(self, value: str) -> None:
        """Bare years and small numbers are not read as seconds since 1970."""
        assert parse_timestamp(value) is None

    @pytest.mark.parametrize(
        "value", [None, "", "   ", "yesterday", "2026-13-45", True, False, [1]]
    )
    def test_unparsable(self, value) -> None:
        assert parse_timestamp(value) is None


# =============================================================================
# Total pages idiom
# =============================================================================


class TestTotalPagesMapper:
    """Tests for page/totalPages/totalItems payloads."""

    def test_implements_protocol(self) -> None:
        assert isinstance(TotalPagesMapper(), PageMapper)

    def test_decodes_page(self, total_pages_body, ten_items) -> None:
        page = TotalPagesMapper().decode(total_pages_body(1, 5, ten_items, total_items=48))

        assert page.page_number == 1
        assert page.total_pages == 5
        assert page.total_items == 48
        assert page.has_more_pages is True
        assert len(page.items) == 10

    def test_preserves_wire_order(self, total_pages_body, wire_item) -> None:
        items = [wire_item(7), wire_item(2), wire_item(9)]
        page = TotalPagesMapper().decode(total_pages_body(1, 1, items))
        assert [item.id for item in page.items] == ["item-7", "item-2", "item-9"]

    def test_maps_item_fields(self, total_pages_body, wire_item) -> None:
        page = TotalPagesMapper().decode(total_pages_body(1, 1, [wire_item(1)]))
        item = page.items[0]

        assert item.id == "item-1"
        assert item.title == "Test News 1"
        assert item.description == "Description for news 1"
        assert item.canonical_url is None
        assert item.image_url == "https://example.com/image1.jpg"
        assert item.source == "Test Source"
        assert item.published_at == datetime(2026, 2, 13, 1, 0, tzinfo=UTC)
        assert item.author == "Test Author 1"
        assert item.category == "Technology"
        assert item.tags == ("tech", "news")

    def test_decodes_item_without_link(self) -> None:
        """The listing endpoint's item record has no article URL."""
        body = {
            "page": 1,
            "totalPages": 3,
            "totalItems": 30,
            "items": [
                {
                    "id": "1",
                    "title": "Breaking: Tech Giant Announces New Product",
                    "description": "A major technology company unveiled its latest innovation.",
                    "imageURL": "https://picsum.photos/400/300?random=1",
                    "publishedDate": "2026-02-13T10:30:00Z",
                    "source": "Tech News",
                    "category": "Technology",
                    "author": "John Doe",
                    "tags": ["tech", "innovation"],
                }
            ],
        }

        page = TotalPagesMapper().decode(json.dumps(body).encode())

        assert page.total_pages == 3
        item = page.items[0]
        assert item.id == "1"
        assert item.canonical_url is None
        assert item.image_url == "https://picsum.photos/400/300?random=1"
        assert item.published_at == datetime(2026, 2, 13, 10, 30, tzinfo=UTC)

    @pytest.mark.parametrize("value", [None, "", "  "])
    def test_blank_link_is_none(self, total_pages_body, wire_item, value) -> None:
        item = TotalPagesMapper().decode(total_pages_body(1, 1, [wire_item(1, url=value)])).items[0]
        assert item.canonical_url is None

    def test_link_under_url_key(self, total_pages_body, wire_item) -> None:
        record = wire_item(1, url="https://example.com/news/1")
        item = TotalPagesMapper().decode(total_pages_body(1, 1, [record])).items[0]
        assert item.canonical_url == "https://example.com/news/1"

    def test_alternate_field_names(self, total_pages_body) -> None:
        record = {
            "id": "x",
            "title": "T",
            "description": "D",
            "canonicalUrl": "https://example.com/x",
            "imageUrl": "https://example.com/x.jpg",
            "source": "S",
            "publishedAt": "2026-02-13T00:00:00Z",
        }
        item = TotalPagesMapper().decode(total_pages_body(1, 1, [record])).items[0]
        assert item.canonical_url == "https://example.com/x"
        assert item.image_url == "https://example.com/x.jpg"

    def test_last_page(self, total_pages_body, ten_items) -> None:
        page = TotalPagesMapper().decode(total_pages_body(5, 5, ten_items))
        assert page.has_more_pages is False

    def test_ignores_unknown_keys(self, total_pages_body, wire_item) -> None:
        body = json.loads(total_pages_body(1, 1, [wire_item(1, extra="x")]))
        body["generatedAt"] = "now"
        page = TotalPagesMapper().decode(json.dumps(body).encode())
        assert len(page.items) == 1


class TestFieldPolicy:
    """Invalid dates drop the item; absent optionals stay absent."""

    def test_invalid_date_drops_item(self, total_pages_body, ten_items, caplog) -> None:
        ten_items[3]["publishedDate"] = "not-a-date"
        mapper = TotalPagesMapper()

        with caplog.at_level(logging.WARNING, logger="newsfeed.mapper"):
            page = mapper.decode(total_pages_body(1, 2, ten_items))

        assert len(page.items) == 9
        assert "item-4" not in [item.id for item in page.items]
        assert mapper.dropped_count == 1
        assert "Dropped 1 item" in caplog.text

    def test_missing_date_drops_item(self, total_pages_body, wire_item) -> None:
        record = wire_item(1)
        del record["publishedDate"]
        page = TotalPagesMapper().decode(total_pages_body(1, 1, [record, wire_item(2)]))
        assert [item.id for item in page.items] == ["item-2"]

    def test_bare_year_drops_item(self, total_pages_body, wire_item) -> None:
        page = TotalPagesMapper().decode(
            total_pages_body(1, 1, [wire_item(1, publishedDate="2026"), wire_item(2)])
        )
        assert [item.id for item in page.items] == ["item-2"]

    def test_numeric_date(self, total_pages_body, wire_item) -> None:
        item = TotalPagesMapper().decode(
            total_pages_body(1, 1, [wire_item(1, publishedDate=1771000000)])
        ).items[0]
        assert item.published_at == datetime(2026, 2, 13, 16, 26, 40, tzinfo=UTC)

    def test_boolean_date_is_type_mismatch(self, total_pages_body, wire_item) -> None:
        with pytest.raises(DecodeFailure) as exc_info:
            TotalPagesMapper().decode(total_pages_body(1, 1, [wire_item(1, publishedDate=True)]))
        assert exc_info.value.kind is DecodeFailureKind.TYPE_MISMATCH

    def test_dropped_items_never_defaulted_to_now(self, total_pages_body, wire_item) -> None:
        page = TotalPagesMapper().decode(
            total_pages_body(1, 1, [wire_item(1, publishedDate="garbage")])
        )
        assert page.items == ()

    @pytest.mark.parametrize("field", ["imageURL", "author", "category"])
    def test_absent_optional_is_none(self, total_pages_body, wire_item, field: str) -> None:
        record = wire_item(1)
        del record[field]
        item = TotalPagesMapper().decode(total_pages_body(1, 1, [record])).items[0]
        assert getattr(item, {"imageURL": "image_url"}.get(field, field)) is None

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_blank_optional_is_none(self, total_pages_body, wire_item, value) -> None:
        item = TotalPagesMapper().decode(
            total_pages_body(1, 1, [wire_item(1, author=value, imageURL=value)])
        ).items[0]
        assert item.author is None
        assert item.image_url is None

    def test_tags_default_empty(self, total_pages_body, wire_item) -> None:
        record = wire_item(1)
        del record["tags"]
        item = TotalPagesMapper().decode(total_pages_body(1, 1, [record])).items[0]
        assert item.tags == ()


class TestDecodeFailures:
    """Payloads that cannot be mapped raise DecodeFailure."""

    def test_not_json(self) -> None:
        with pytest.raises(DecodeFailure) as exc_info:
            TotalPagesMapper().decode(b"<html>oops</html>")
        assert exc_info.value.kind is DecodeFailureKind.MALFORMED

    def test_missing_envelope_field(self) -> None:
        body = json.dumps({"page": 1, "items": []}).encode()
        with pytest.raises(DecodeFailure) as exc_info:
            TotalPagesMapper().decode(body)
        assert exc_info.value.kind is DecodeFailureKind.MISSING_FIELD
        assert exc_info.value.field == "totalPages"

    def test_missing_item_field(self, total_pages_body, wire_item) -> None:
        record = wire_item(1)
        del record["title"]
        with pytest.raises(DecodeFailure) as exc_info:
            TotalPagesMapper().decode(total_pages_body(1, 1, [record]))
        assert exc_info.value.kind is DecodeFailureKind.MISSING_FIELD
        assert exc_info.value.field == "items.0.title"

    def test_type_mismatch(self, total_pages_body, wire_item) -> None:
        with pytest.raises(DecodeFailure) as exc_info:
            TotalPagesMapper().decode(total_pages_body(1, 1, [wire_item(1, title=42)]))
        assert exc_info.value.kind is DecodeFailureKind.TYPE_MISMATCH

    def test_items_not_a_list(self) -> None:
        body = json.dumps({"page": 1, "totalPages": 1, "items": {"a": 1}}).encode()
        with pytest.raises(DecodeFailure) as exc_info:
            TotalPagesMapper().decode(body)
        assert exc_info.value.kind is DecodeFailureKind.TYPE_MISMATCH

    def test_page_beyond_total_is_malformed(self, total_pages_body, ten_items) -> None:
        with pytest.raises(DecodeFailure) as exc_info:
            TotalPagesMapper().decode(total_pages_body(6, 5, ten_items))
        assert exc_info.value.kind is DecodeFailureKind.MALFORMED


# =============================================================================
# Has-next-page idiom
# =============================================================================


class TestHasNextPageMapper:
    """Tests for page/pageSize/totalCount/hasNextPage payloads."""

    def test_decodes_page(self, has_next_page_body, ten_items) -> None:
        page = HasNextPageMapper().decode(has_next_page_body(3, True, ten_items))

        assert page.page_number == 3
        assert page.total_pages is None
        assert page.has_next_page is True
        assert page.has_more_pages is True
        assert page.page_size == 10
        assert page.total_items == 100
        assert len(page.items) == 10

    def test_no_next_page(self, has_next_page_body, ten_items) -> None:
        page = HasNextPageMapper().decode(has_next_page_body(10, False, ten_items))
        assert page.has_more_pages is False

    def test_rejects_total_pages_payload(self, total_pages_body, ten_items) -> None:
        """A deployment uses one idiom; the other shape does not decode."""
        with pytest.raises(DecodeFailure) as exc_info:
            HasNextPageMapper().decode(total_pages_body(1, 5, ten_items))
        assert exc_info.value.kind is DecodeFailureKind.MISSING_FIELD


class TestMapperFor:
    def test_selects_by_style(self) -> None:
        assert isinstance(mapper_for(PaginationStyle.TOTAL_PAGES), TotalPagesMapper)
        assert isinstance(mapper_for("has_next_page"), HasNextPageMapper)

    def test_unknown_style(self) -> None:
        with pytest.raises(ValueError):
            mapper_for("cursor")
