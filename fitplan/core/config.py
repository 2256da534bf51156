"""Application configuration from environment variables."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment (and .env file)."""

    model_config = SettingsConfigDict(
        env_prefix="FITPLAN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "fitplan"
    debug: bool = False

    # Storage (single local SQLite file)
    data_dir: Path = Path.home() / ".fitplan"
    database_filename: str = "fitplan.db"
    database_timeout_seconds: float = 5.0
    preferences_filename: str = "preferences.json"

    # Logging
    log_level: str = "INFO"
    log_dir: Path | None = None

    @property
    def database_path(self) -> Path:
        return self.data_dir / self.database_filename

    @property
    def preferences_path(self) -> Path:
        return self.data_dir / self.preferences_filename

    @property
    def database_url(self) -> str:
        """Synchronous URL for Alembic and tooling."""
        return f"sqlite:///{self.database_path}"

    @property
    def async_database_url(self) -> str:
        """Async URL for the store (aiosqlite driver)."""
        return f"sqlite+aiosqlite:///{self.database_path}"


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
