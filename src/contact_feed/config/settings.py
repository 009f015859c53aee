# Copyright (c)
# SPDX-License-Identifier: MIT
"""Application Configuration (Pydantic Settings, v2)

Summary:
    Typed, validated process-level configuration. Transport-specific knobs
    live next to their client (``ContactFeedSettings``); this module only
    holds settings shared by every entrypoint.

Design:
    - Pydantic v2 BaseSettings with explicit ``validation_alias`` names.
    - Environment enumeration for behavior toggles (includes TEST).
    - Singleton accessor ``get_settings()`` with LRU cache.
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from contact_feed.infrastructure.logging.logger import get_json_logger

log = get_json_logger(__name__)

_LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


class Environment(str, Enum):
    """Logical deployment environment."""

    DEVELOPMENT = "development"
    TEST = "test"
    CI = "ci"
    STAGING = "staging"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """Process-wide settings shared by the CLI and library entrypoints."""

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Logical deployment environment.",
        validation_alias="ENVIRONMENT",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level name.",
        validation_alias="LOG_LEVEL",
    )

    model_config = SettingsConfigDict(extra="ignore", case_sensitive=False)

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}")
        return level

    @property
    def is_production(self) -> bool:
        """Return True when running in the production environment."""
        return self.environment is Environment.PRODUCTION


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the cached settings singleton."""
    settings = Settings()
    log.debug(
        "settings.loaded",
        extra={"extra": {"environment": settings.environment.value, "log_level": settings.log_level}},
    )
    return settings
