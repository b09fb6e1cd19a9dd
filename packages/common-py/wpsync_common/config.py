"""Runtime settings, read from ``WPSYNC_*`` environment variables."""

from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_MANIFEST_FILE,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_WP_BIN,
    LOG_LEVELS,
    REPOSITORIES_FILE,
    WP_ORG_API_TEMPLATE,
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="WPSYNC_", extra="ignore")

    manifest_file: str = DEFAULT_MANIFEST_FILE
    repositories_file: str = REPOSITORIES_FILE
    wp_bin: str = DEFAULT_WP_BIN
    wp_path: Optional[str] = None
    index_url_template: str = WP_ORG_API_TEMPLATE
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.lower()
        if v not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return v

    @field_validator("index_url_template")
    @classmethod
    def validate_index_template(cls, v: str) -> str:
        if "{slug}" not in v:
            raise ValueError("index_url_template must contain a {slug} placeholder")
        return v


def get_settings() -> Settings:
    """Build settings from the current environment."""
    return Settings()
