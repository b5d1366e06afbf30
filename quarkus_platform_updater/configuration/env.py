"""Pydantic Settings model for application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from quarkus_platform_updater.utils.constants import DEFAULT_PLATFORMS_API_URL


class Settings(BaseSettings):
    """Environment variable settings for the application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Generic application-wide settings
    DEBUG: bool = False

    # GitHub API settings, named after the variables GitHub Actions provides
    GITHUB_API_URL: str = "https://api.github.com"
    GITHUB_REPOSITORY: str | None = None
    GITHUB_TOKEN: str | None = None

    # Platforms API settings
    PLATFORMS_API_URL: str = DEFAULT_PLATFORMS_API_URL


settings = Settings()
