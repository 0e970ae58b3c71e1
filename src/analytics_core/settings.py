"""Application configuration using Pydantic Settings.

This module centralizes runtime configuration for the analytics core. Values
can be provided via environment variables (preferred) or fall back to the
defaults below. A ``Settings`` instance is intended to be retrieved via
``get_settings`` which caches the object for reuse across the process.

Environment variable prefix: ``ANALYTICS_CORE_`` (e.g. ``ANALYTICS_CORE_TEST_MODE``).
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime application settings.

    Attributes map directly to environment variables using the ``ANALYTICS_CORE_``
    prefix (case-insensitive). For example, ``test_mode`` <- ``ANALYTICS_CORE_TEST_MODE``.
    """

    log_level: Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Application log level",
    )
    test_mode: bool = Field(
        default=False,
        description="Process-wide test mode flag; enables test-only events",
    )  # fmt: skip
    observer_error_policy: Literal["continue", "raise"] = Field(
        default="continue",
        description="What dispatch does when an observer raises: isolate and continue, or raise",
    )  # fmt: skip
    strict_translations: bool | None = Field(
        default=None,
        description="Raise on translation format mismatches. None follows test_mode.",
    )  # fmt: skip
    default_menu_order: int = Field(
        default=10,
        description="Order given to menu entries added without an explicit order",
    )  # fmt: skip

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str | None) -> str:
        """Normalize and validate log level."""
        if v is None:
            return "INFO"

        v_upper = str(v).upper()

        allowed = {"TRACE", "DEBUG", "INFO", "WARNING", "ERROR"}
        if v_upper not in allowed:
            raise ValueError(f"Invalid log level: {v}. Must be one of: {', '.join(sorted(allowed))}")

        return v_upper

    @field_validator("observer_error_policy", mode="before")
    @classmethod
    def validate_observer_error_policy(cls, v: str | None) -> str:
        """Normalize the observer error policy to lowercase."""
        if v is None:
            return "continue"
        return str(v).strip().lower()

    @property
    def translations_are_strict(self) -> bool:
        """Whether translation format mismatches should raise."""
        if self.strict_translations is None:
            return self.test_mode
        return self.strict_translations

    model_config = SettingsConfigDict(
        env_prefix="ANALYTICS_CORE_",  # Prefix for env vars
        case_sensitive=False,
        extra="ignore",  # Ignore unexpected env vars
        env_file=".env",  # Optional .env loading (if present)
        env_file_encoding="utf-8",
    )


@lru_cache
def get_settings() -> Settings:
    """Return the cached ``Settings`` instance.

    The first invocation reads environment variables / .env file; subsequent
    calls reuse the same object to ensure consistent config.
    """

    return Settings()


__all__ = ["Settings", "get_settings"]
