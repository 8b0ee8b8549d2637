"""Centralized configuration using pydantic-settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables.

    Variables are read with the MESSAGE_EMIT_ prefix, e.g.
    MESSAGE_EMIT_EMIT_TRACE=true turns on the per-append debug trace.
    """

    model_config = SettingsConfigDict(
        env_prefix="MESSAGE_EMIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = "INFO"

    # Write a debug entry for every appended message
    emit_trace: bool = False

    # Serialize list mutation inside each accumulator
    lock_accumulators: bool = True

    # Drop records of earlier requests when a request boundary opens
    clear_on_bind: bool = True

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {', '.join(sorted(valid_levels))}")
        return upper

    def to_dict(self) -> dict[str, Any]:
        return {
            "log_level": self.log_level,
            "emit_trace": self.emit_trace,
            "lock_accumulators": self.lock_accumulators,
            "clear_on_bind": self.clear_on_bind,
        }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached Settings singleton.

    For testing: override with get_settings.cache_clear() then set env vars.
    """
    return Settings()
