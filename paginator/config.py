"""
Configuration management for paginator.
Loads settings from the environment or from a YAML configuration file.
"""

import os

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Pagination defaults and logging options."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Pagination
    default_page_size: int = Field(default=20, alias="DEFAULT_PAGE_SIZE")
    min_page_size: int = Field(default=1, alias="MIN_PAGE_SIZE")
    max_page_size: int = Field(default=100, alias="MAX_PAGE_SIZE")

    # Logging Configuration
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_to_file: bool = Field(default=False, alias="LOG_TO_FILE")
    log_file_path: str = Field(default="logs/app.log", alias="LOG_FILE_PATH")
    log_format: str = Field(default="json", alias="LOG_FORMAT")
    log_max_bytes: int = Field(default=50 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 50MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @classmethod
    def from_yaml(cls, config_path: str) -> "Settings":
        """Load settings from YAML file."""
        with open(config_path) as f:
            config_data = yaml.safe_load(f) or {}
        return cls(**config_data)


def get_settings() -> Settings:
    """Get a settings instance.

    When the CONFIG environment variable is set, settings are read from the
    YAML file it names; otherwise they come from the environment and defaults.

    Raises:
        FileNotFoundError: If CONFIG points to a file that doesn't exist
    """
    config_path = os.getenv("CONFIG")

    if not config_path:
        return Settings()

    if not os.path.exists(config_path):
        raise FileNotFoundError(
            f"Configuration file not found: {config_path}\n"
            f"Please check the CONFIG environment variable points to a valid file."
        )

    return Settings.from_yaml(config_path)
