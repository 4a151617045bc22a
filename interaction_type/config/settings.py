"""
Settings Management with Pydantic

Provides type-safe configuration management with:
- Environment variable support
- Validation
- Notification output configuration
"""

from enum import Enum
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class NotificationFormat(str, Enum):
    """Supported notification renderings."""
    TEXT = "text"
    HTML = "html"


class NotificationConfig(BaseSettings):
    """Where and how notifications are rendered."""
    model_config = SettingsConfigDict(
        env_prefix="NOTIFICATION_",
        extra="ignore"
    )

    format: NotificationFormat = NotificationFormat.TEXT
    echo: bool = True   # write rendered notifications to the console
    log: bool = False   # also emit one log record per notification


class Settings(BaseSettings):
    """Main application settings."""
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Application
    app_name: str = "Interaction Type Framework"
    debug: bool = False
    log_level: str = "INFO"

    notification: NotificationConfig = Field(default_factory=NotificationConfig)

    @classmethod
    def from_env(cls) -> "Settings":
        """Create settings from environment variables."""
        return cls(notification=NotificationConfig())


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings.from_env()
