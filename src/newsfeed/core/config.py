"""newsfeed configuration.

Application settings loaded from environment variables with NEWSFEED_ prefix.

Example:
    >>> from newsfeed.core.config import get_settings
    >>> settings = get_settings(log_level="DEBUG")
    >>> settings.log_level
    'DEBUG'
    >>> settings.pagination_style.value
    'total_pages'
"""

from __future__ import annotations

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from newsfeed.models.page import PaginationStyle


class Settings(BaseSettings):
    """Application settings.

    Loads from environment variables with NEWSFEED_ prefix.

    Example:
        >>> from newsfeed.core.config import Settings
        >>> s = Settings(base_url="https://news.example.com")
        >>> s.feed_url
        'https://news.example.com/feed'
        >>> s.page_param
        'page'
    """

    model_config = SettingsConfigDict(
        env_prefix="NEWSFEED_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Endpoint
    base_url: str = Field(
        default="https://autoplay.free.beeceptor.com",
        description="Base URL of the feed service",
    )
    feed_path: str = Field(default="/feed", description="Path of the paginated listing")
    page_param: str = Field(default="page", description="Query parameter carrying the page number")
    page_size_param: str = Field(default="pageSize", description="Query parameter carrying the page size")
    page_size: int | None = Field(default=None, ge=1, le=500, description="Requested items per page")

    # One idiom per deployment
    pagination_style: PaginationStyle = Field(
        default=PaginationStyle.TOTAL_PAGES,
        description="Pagination metadata shape returned by the endpoint",
    )

    # Transport
    request_timeout: float = Field(default=30.0, ge=1.0)
    user_agent: str = Field(default="newsfeed/1.0")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="console", description="Log format: console or plain")

    @property
    def feed_url(self) -> str:
        """Absolute URL of the paginated listing."""
        return self.base_url.rstrip("/") + "/" + self.feed_path.lstrip("/")


def get_settings(**overrides: Any) -> Settings:
    """Get settings with optional overrides.

    Example:
        >>> from newsfeed.core.config import get_settings
        >>> s = get_settings(page_size=20)
        >>> s.page_size
        20
    """
    return Settings(**overrides)
