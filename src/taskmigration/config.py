"""Configuration management using pydantic-settings."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TASKMIGRATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server settings
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False

    # Vault settings
    vault_path: Path | None = None
    daily_folder: str = "00_Daily"  # relative to vault root
    daily_format: str = "%Y-%m-%d"  # strftime format of daily note filenames

    # Data storage (settings.json lives here)
    data_path: Path = Path("data")


def get_settings() -> Settings:
    """Get application settings instance."""
    return Settings()
