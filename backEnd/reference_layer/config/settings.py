"""
Reference layer settings with environment variable support.

Configuration is loaded from environment variables with optional .env file.
REFERENCE_CONFIG_FILE overrides the packaged reference.config when set.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Shipped with the package, used when no override is configured
DEFAULT_REFERENCE_CONFIG_PATH = Path(__file__).parent.parent / "data" / "reference.config"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Reference layer settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Input file override
    reference_config_file: Optional[Path] = Field(
        default=None, alias="REFERENCE_CONFIG_FILE"
    )

    # Logging (applied by the CLI only, the library never configures handlers)
    log_level: str = Field(default="INFO", alias="REFERENCE_LOG_LEVEL")

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: {value!r}. Must be one of: {', '.join(LOG_LEVELS)}"
            )
        return level

    def is_override_configured(self) -> bool:
        """Check if a reference.config override path is set."""
        return self.reference_config_file is not None

    def get_reference_config_path(self) -> Path:
        """Get the reference.config path, falling back to the packaged default."""
        if self.is_override_configured():
            return Path(self.reference_config_file)
        return DEFAULT_REFERENCE_CONFIG_PATH


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
