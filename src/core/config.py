"""Application configuration using Pydantic V2."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings read from the environment (prefix BUS_LOOKUP_) or .env."""

    model_config = SettingsConfigDict(
        env_prefix="BUS_LOOKUP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    debug: bool = Field(default=False, description="Debug mode: forces DEBUG logging")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    # Project paths
    project_root: Path = Field(default_factory=lambda: Path(__file__).parent.parent.parent)
    config_path: Path = Field(
        default_factory=lambda: Path(__file__).parent.parent.parent / "config" / "config.yaml",
        description="YAML file with source and display config",
    )

    # Network
    download_timeout: float | None = Field(
        default=None, description="Seconds to wait for the spreadsheet download (None = no limit)"
    )

    @property
    def assets_dir(self) -> Path:
        """Static illustrations shipped with the app."""
        return self.project_root / "src" / "app" / "assets"


# Singleton instance
settings = Settings()
