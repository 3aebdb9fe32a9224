"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Database backing the key-value store
    DATABASE_URL: str = "sqlite:///pointpath.db"

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # Storage keys are "<prefix>:anchor", "<prefix>:focus", "<prefix>:snapshot"
    STORAGE_KEY_PREFIX: str = "editor"

    # Sentence highlighting
    HIGHLIGHT_SENTENCE: str = "Roses are red."
    SEARCH_FLATTENING_POLICY: Literal["exact", "rendered"] = "rendered"

    @field_validator("STORAGE_KEY_PREFIX", mode="after")
    @classmethod
    def strip_key_prefix(cls, value: str) -> str:
        """Strip whitespace and reject an empty key prefix."""
        value = value.strip()
        if not value:
            msg = "STORAGE_KEY_PREFIX must not be empty"
            raise ValueError(msg)
        return value


def configure_logging(environment: str = "development") -> None:
    """Configure structured logging with structlog."""
    # Determine if we should use JSON output (production) or console output (dev)
    use_json = environment == "production"

    # Configure stdlib logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if environment == "development" else logging.INFO,
    )

    processors: list[Callable[..., Any]] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
