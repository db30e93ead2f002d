"""Configuration management for the application."""

from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Data root: the SQLite DB lives here unless database_url is given
    data_root: str = Field(default="~/.representative_directory")

    # Database: auto-derived from data_root if not explicitly set
    database_url: str | None = Field(default=None)
    sql_echo: bool = Field(default=False)

    # Backend Server
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8000)
    api_prefix: str = Field(default="/api")

    # CORS
    allowed_origins: list[str] = Field(default=["http://localhost:3000"])

    # Logging
    log_level: str = Field(default="INFO")

    @model_validator(mode="after")
    def derive_paths(self) -> "Settings":
        """Expand data_root and derive database_url if not explicitly set."""
        self.data_root = str(Path(self.data_root).expanduser().resolve())
        if self.database_url is None:
            self.database_url = f"sqlite:///{self.data_root}/directory.db"
        self.log_level = self.log_level.upper()
        return self

    @property
    def is_sqlite(self) -> bool:
        """Whether the configured database is SQLite."""
        return bool(self.database_url) and self.database_url.startswith("sqlite")


# Global settings instance
settings = Settings()
