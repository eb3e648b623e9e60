# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # One database per schema; all three define a "users" table.
    qna_database_url: str = "sqlite+aiosqlite:///./qna.db"
    movies_database_url: str = "sqlite+aiosqlite:///./movies.db"
    rentals_database_url: str = "sqlite+aiosqlite:///./rentals.db"
    database_pool_size: int = 20
    echo_sql: bool = False

    environment: str = "production"
    log_level: str = "info"

    booking_reference_prefix: str = "BK"
    max_thread_depth: int = 50
    default_page_size: int = 50

    model_config = {"env_file": ".env"}

    @model_validator(mode="after")
    def _validate_log_level(self) -> "Settings":
        if self.log_level.lower() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return self

    def database_url(self, schema: str) -> str:
        """Return the database URL configured for ``schema``."""
        try:
            return {
                "qna": self.qna_database_url,
                "movies": self.movies_database_url,
                "rentals": self.rentals_database_url,
            }[schema]
        except KeyError:
            raise ValueError(f"unknown schema {schema!r}") from None


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance. Lazy-loaded to avoid import-time failures."""
    return Settings()
