"""Base model shared by every domain type.

Example:
    >>> from newsfeed.models.base import NewsFeedModel
    >>> NewsFeedModel.model_config["frozen"]
    True
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class NewsFeedModel(BaseModel):
    """Base model with standard configuration.

    Domain values are immutable once constructed.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        str_strip_whitespace=True,
        frozen=True,
        extra="forbid",
    )
