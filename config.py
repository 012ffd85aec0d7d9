"""Configuration management for the link shortener."""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Config(BaseSettings):
    """Application configuration."""

    # Storage settings
    data_file: str = Field(
        default="data/links.json",
        description="Path of the JSON file holding the short code -> URL mapping"
    )

    public_dir: str = Field(
        default="public",
        description="Directory holding index.html and style.css"
    )

    # Server settings
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind to"
    )

    port: int = Field(
        default=3000,
        description="Port to listen on"
    )

    # Short code settings
    short_code_bytes: int = Field(
        default=4,
        ge=1,
        description="Random bytes per generated short code (hex encoded, so codes are twice as long)"
    )

    max_collision_retries: int = Field(
        default=0,
        ge=0,
        description="Extra attempts when a generated code is already taken. 0 = report the conflict."
    )

    strict_short_codes: bool = Field(
        default=False,
        description="Reject supplied short codes outside [A-Za-z0-9_-] or named like a fixed route"
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (logs to stdout if not specified)"
    )

    log_json: bool = Field(
        default=False,
        description="Use JSON format for logs"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",  # Ignore extra environment variables
    }


def load_config() -> Config:
    """Load configuration from environment."""
    return Config()
