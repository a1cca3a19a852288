"""
Configuration management for Newsroom.

Everything has a sensible default; set NEWSLETTER_BOT_TOKEN to enable
newsletter broadcasting.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings.

    Minimal configuration example:
        NEWSLETTER_BOT_TOKEN=your_token
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database (SQLite by default, zero config)
    database_url: str = "sqlite+aiosqlite:///./data/newsroom.db"

    # Reference languages seeded at startup
    languages: list[str] = ["en", "ru", "uz"]
    default_language: str = "en"

    # Pagination
    default_page_size: int = 10

    # Newsletter
    newsletter_bot_token: str | None = None
    newsletter_parse_mode: Literal["MarkdownV2", "HTML", "Markdown"] = "MarkdownV2"
    newsletter_action_label: str = "Full"
    newsletter_send_timeout_seconds: float = 10.0
    newsletter_max_concurrency: int = 10

    # API service
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "console"] = "console"

    # ===== Derived properties =====

    @property
    def newsletter_enabled(self) -> bool:
        """Check if newsletter broadcasting is enabled (token provided)."""
        return bool(self.newsletter_bot_token)

    @property
    def data_dir(self) -> Path:
        """Get data directory from database URL."""
        if self.database_url.startswith("sqlite"):
            db_path = self.database_url.split("///")[-1]
            return Path(db_path).parent
        return Path("./data")

    # ===== Validators =====

    @field_validator("default_page_size", "newsletter_max_concurrency")
    @classmethod
    def validate_positive_int(cls, v: int) -> int:
        if v < 1:
            raise ValueError("value must be at least 1")
        return v

    @field_validator("newsletter_send_timeout_seconds")
    @classmethod
    def validate_send_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("newsletter_send_timeout_seconds must be positive")
        return v

    @field_validator("languages")
    @classmethod
    def validate_languages(cls, v: list[str]) -> list[str]:
        codes = [code.strip().lower() for code in v if code.strip()]
        if not codes:
            raise ValueError("at least one language code is required")
        return codes


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Usage:
        from newsroom.config import get_settings
        settings = get_settings()
    """
    return Settings()
