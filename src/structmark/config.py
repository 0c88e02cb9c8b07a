"""Library-wide defaults loaded from environment / .env file.

Every component also takes explicit constructor arguments; these settings only
supply the defaults used by ``MarkupService.from_settings()`` and the CLI.
"""

from __future__ import annotations

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="STRUCTMARK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Entities ─────────────────────────────────────────
    default_context: str = Field(
        default="https://schema.org",
        description="Context URI given to entities built without one",
    )
    max_depth: int = Field(
        default=32,
        ge=1,
        description="Maximum nesting depth of entities before rendering gives up",
    )

    # ── Validation ───────────────────────────────────────
    strict_mode: bool = Field(
        default=False,
        description="Validate before rendering and raise on invalid entities",
    )

    # ── Rendering ────────────────────────────────────────
    pretty_print: bool = True
    include_meta_elements: bool = True
    use_semantic_elements: bool = False
    container_element: str = "div"

    # ── Logging ──────────────────────────────────────────
    log_level: LogLevel = LogLevel.INFO


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the cached singleton settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()  # type: ignore[call-arg]
    return _settings


def reset_settings() -> None:
    """Clear the cached settings so they are re-read on next access."""
    global _settings
    _settings = None
