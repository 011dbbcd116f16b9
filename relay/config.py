import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigError


class Settings(BaseSettings):
    """
    Configuration via environment variables.

    Values are read from the environment first, then from `.env`, then from
    one-file-per-secret under SECRETS_DIR (e.g. /run/secrets/LINEAR_API_KEY).
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Discord destination
    DISCORD_WEBHOOK_URL: str | None = Field(
        default=None, description="Incoming webhook URL of the Discord channel"
    )

    # Linear enrichment
    LINEAR_API_KEY: str | None = Field(
        default=None, description="Linear personal API key, sent as-is in Authorization"
    )
    LINEAR_API_URL: str = Field(
        default="https://api.linear.app/graphql", description="Linear GraphQL endpoint"
    )

    LOG_LEVEL: str = Field(default="INFO", description="Root logging level")


def get_settings() -> Settings:
    """Factory function to get settings instance.

    This allows for lazy initialization and easier testing.
    """
    return Settings(_secrets_dir=os.environ.get("SECRETS_DIR") or None)


def get_config(settings: Settings, name: str) -> str:
    """Look up a required configuration value by name.

    Args:
        settings: Loaded settings
        name: Setting name, e.g. 'DISCORD_WEBHOOK_URL'

    Returns:
        The configured value

    Raises:
        ConfigError: If the value is missing or empty
    """
    value = getattr(settings, name, None)
    if not value:
        raise ConfigError(f"{name} is not set")
    return str(value)
