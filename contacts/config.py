from pathlib import Path
from typing import Final

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env files."""

    # Application configuration
    debug: bool = Field(default=False, description="Enable debug mode")
    app_name: str = Field(default="Contacts", description="Application name")
    version: str = Field(default="0.1.0", description="Application version")

    # Persistence configuration
    catalog_path: Path | None = Field(
        default=None,
        description="JSON document holding the catalog (None keeps it in memory)",
    )
    json_indent: int | None = Field(
        default=None, ge=0, description="Indentation of the saved document"
    )

    # Logging configuration
    log_to_file: bool = Field(default=False, description="Also write logs to a file")
    log_dir: Path = Field(default=Path("logs"), description="Directory for log files")

    # Pydantic Settings configuration
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_persistence(self) -> bool:
        """Check if a persistence target is configured."""
        return self.catalog_path is not None


# Global settings instance
settings: Final = Settings()
