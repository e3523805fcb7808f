"""Application configuration using pydantic-settings."""
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 3001
    cors_origins: list[str] = ["*"]
    log_level: str = "INFO"

    # Data paths
    data_dir: str = "data"
    data_file: str = "campaignData.json"

    # Snapshot cache lifetime
    cache_ttl_seconds: float = 300.0

    # Base URL used by the client and CLI scripts
    api_url: str = "http://localhost:3001"

    @property
    def data_path(self) -> Path:
        return Path(self.data_dir) / self.data_file


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
