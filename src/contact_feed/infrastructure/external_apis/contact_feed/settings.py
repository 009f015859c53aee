# Copyright (c)
# SPDX-License-Identifier: MIT
"""Contact feed transport client settings.

Purpose:
    Provide Pydantic-based configuration for the contact feed HTTP client,
    including the default feed URL, user agent, timeout and retry budget.

Layer:
    infrastructure

Notes:
    - Values are sourced from environment variables prefixed with ``CONTACT_FEED_``.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ContactFeedSettings(BaseSettings):
    """Configuration for the contact feed HTTP client.

    Environment variables (with ``model_config.env_prefix``):

    * ``CONTACT_FEED_URL``
    * ``CONTACT_FEED_USER_AGENT``
    * ``CONTACT_FEED_TIMEOUT_S``
    * ``CONTACT_FEED_MAX_RETRIES``
    """

    url: str | None = Field(
        None,
        description="Default URL of the JSON contact document.",
    )
    user_agent: str = Field(
        "contact-feed/0.1",
        description="User agent string sent with every request.",
    )
    timeout_s: float = Field(
        8.0,
        gt=0,
        description="Per-request timeout in seconds for the transport client.",
    )
    max_retries: int = Field(
        3,
        ge=0,
        description="Maximum number of retry attempts for retryable failures.",
    )

    model_config: SettingsConfigDict = SettingsConfigDict(
        env_prefix="CONTACT_FEED_",
        extra="ignore",
    )
