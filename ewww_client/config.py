from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    BROWSER_USER_AGENT,
    DEFAULT_BASE_URL,
    DEFAULT_CONVERSION_TIMEOUT,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_USER_AGENT,
    KEEP_ALIVE_QUALITY,
)


class EwwwSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="EWWW_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # API
    base_url: str = Field(
        default=DEFAULT_BASE_URL, description="Base URL of the EWWW cloud API"
    )
    api_key: Optional[str] = Field(default=None, description="EWWW API key")
    domain: str = Field(
        default="", description="Requesting domain reported with conversions"
    )

    # Transport
    request_timeout: float = Field(
        default=DEFAULT_REQUEST_TIMEOUT,
        gt=0,
        description="Timeout for verify, quota and keep-alive requests in seconds",
    )
    conversion_timeout: float = Field(
        default=DEFAULT_CONVERSION_TIMEOUT,
        gt=0,
        description="Timeout for conversion uploads in seconds",
    )
    verify_ssl: bool = Field(
        default=False,
        description="Verify the backend's TLS certificate (off to match the hosted service)",
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        min_length=1,
        description="User-Agent for conversion requests",
    )
    browser_user_agent: str = Field(
        default=BROWSER_USER_AGENT,
        min_length=1,
        description="User-Agent for verify and quota requests",
    )

    # Keep-alive
    keep_alive_quality: int = Field(
        default=KEEP_ALIVE_QUALITY, ge=0, le=100, description="Keep-alive ping quality"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    json_logs: bool = Field(default=False, description="Render logs as JSON")

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v.upper()


settings = EwwwSettings()
