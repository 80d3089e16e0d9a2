"""Base page mapper implementation.

Provides BasePageMapper, the shared decoding pipeline for listing responses:

1. Validate the JSON body against a wire envelope (pydantic)
2. Convert each wire item into a FeedItem, dropping items without a usable
   publication timestamp
3. Build the Page from the envelope's pagination metadata

Subclasses only describe the envelope for their pagination idiom.

Example:
    >>> from newsfeed.mapper.base import parse_timestamp
    >>> parse_timestamp("2026-02-13T09:30:00Z").isoformat()
    '2026-02-13T09:30:00+00:00'
    >>> parse_timestamp("yesterday") is None
    True
"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from datetime import UTC, datetime
from typing import Any, ClassVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictFloat, StrictInt
from pydantic import ValidationError as PydanticValidationError

from newsfeed.core.exceptions import DecodeFailure, DecodeFailureKind
from newsfeed.models.item import FeedItem
from newsfeed.models.page import Page

logger = logging.getLogger(__name__)

_EPOCH_SECONDS = re.compile(r"\d{9,11}(\.\d+)?")


class WireModel(BaseModel):
    """Base for wire schemas: unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class WireItem(WireModel):
    """One item record as sent by the listing endpoint."""

    id: str
    title: str
    description: str
    canonical_url: str | None = Field(
        default=None, validation_alias=AliasChoices("url", "canonicalUrl")
    )
    image_url: str | None = Field(
        default=None, validation_alias=AliasChoices("imageURL", "imageUrl")
    )
    source: str
    published: StrictInt | StrictFloat | str | None = Field(
        default=None, validation_alias=AliasChoices("publishedDate", "publishedAt")
    )
    author: str | None = None
    category: str | None = None
    tags: list[str] | None = None


def parse_timestamp(value: Any) -> datetime | None:
    """Parse a publication timestamp.

    Accepts ISO 8601 strings (a trailing ``Z`` is read as UTC) and Unix
    timestamps in seconds. A numeric string counts as seconds only when it has
    9 to 11 integer digits (1973 to 5138), so a bare year such as "2026" is
    rejected rather than read as 1970. JSON booleans never reach here: the
    wire schema rejects them. Naive values are taken as UTC.

    Returns:
        Aware datetime, or None if the value is missing or unparsable.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value, tz=UTC)
        except (OverflowError, OSError, ValueError):
            return None

    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        if not _EPOCH_SECONDS.fullmatch(text):
            return None
        try:
            return datetime.fromtimestamp(float(text), tz=UTC)
        except (OverflowError, OSError, ValueError):
            return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def _optional(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def decode_failure_from(error: PydanticValidationError) -> DecodeFailure:
    """Classify a pydantic validation error into a DecodeFailure."""
    first = error.errors()[0]
    error_type = first.get("type", "")
    field = ".".join(str(part) for part in first.get("loc", ())) or None

    if error_type == "missing":
        kind = DecodeFailureKind.MISSING_FIELD
    elif error_type in ("json_invalid", "json_type"):
        kind = DecodeFailureKind.MALFORMED
    elif error_type.endswith("_type") or error_type.endswith("_parsing"):
        kind = DecodeFailureKind.TYPE_MISMATCH
    else:
        kind = DecodeFailureKind.MALFORMED

    message = first.get("msg", str(error))
    if field:
        message = f"{field}: {message}"
    return DecodeFailure(kind, message, field=field, cause=error)


class BasePageMapper(ABC):
    """Base class for page mappers.

    Subclasses set ``envelope`` to their wire schema and implement
    :meth:`_to_page` to read its pagination metadata.

    Attributes:
        dropped_count: Items dropped by the last :meth:`decode` call.
    """

    envelope: ClassVar[type[WireModel]]

    def __init__(self) -> None:
        self.dropped_count = 0

    def decode(self, raw: bytes) -> Page:
        """Decode a listing response body.

        Args:
            raw: Response body (UTF-8 JSON).

        Returns:
            Page with items in wire order.

        Raises:
            DecodeFailure: If the body is not JSON or does not match the
                expected shape.
        """
        try:
            envelope = self.envelope.model_validate_json(raw)
        except PydanticValidationError as e:
            raise decode_failure_from(e) from e

        items: list[FeedItem] = []
        dropped = 0
        for wire_item in envelope.items:
            item = self._to_item(wire_item)
            if item is None:
                dropped += 1
                continue
            items.append(item)
        self.dropped_count = dropped

        try:
            page = self._to_page(envelope, tuple(items))
        except PydanticValidationError as e:
            raise decode_failure_from(e) from e

        if dropped:
            logger.warning(
                f"Dropped {dropped} item(s) without a valid publication date from page {page.page_number}"
            )
        return page

    def _to_item(self, wire: WireItem) -> FeedItem | None:
        """Convert a wire item, or return None if it must be dropped."""
        published_at = parse_timestamp(wire.published)
        if published_at is None:
            logger.debug(f"Item {wire.id!r} has unparsable publication date {wire.published!r}")
            return None

        try:
            return FeedItem(
                id=wire.id,
                title=wire.title,
                description=wire.description,
                canonical_url=_optional(wire.canonical_url),
                image_url=_optional(wire.image_url),
                source=wire.source,
                published_at=published_at,
                author=_optional(wire.author),
                category=_optional(wire.category),
                tags=tuple(tag for tag in (t.strip() for t in wire.tags or ()) if tag),
            )
        except PydanticValidationError as e:
            raise decode_failure_from(e) from e

    @abstractmethod
    def _to_page(self, envelope: Any, items: tuple[FeedItem, ...]) -> Page:
        """Build the page from the validated envelope.

        Raises:
            pydantic.ValidationError: If the pagination metadata is inconsistent.
        """
        ...
