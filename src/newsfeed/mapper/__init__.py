"""Decoding of listing responses into domain pages."""

from newsfeed.mapper.base import BasePageMapper, parse_timestamp
from newsfeed.mapper.json import HasNextPageMapper, TotalPagesMapper, mapper_for

__all__ = [
    "BasePageMapper",
    "HasNextPageMapper",
    "TotalPagesMapper",
    "mapper_for",
    "parse_timestamp",
]
