"""Configuration management using Pydantic Settings."""

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from squarekit.endpoints import Environment


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Square Configuration
    square_access_token: str = ""
    square_environment: Environment = Environment.SANDBOX
    square_version: str = "2022-10-19"  # Square-Version header
    square_timeout_seconds: float = 30.0

    # Logging
    log_level: str = "INFO"

    @field_validator("square_environment", mode="before")
    @classmethod
    def lowercase_environment(cls, v):
        if isinstance(v, str):
            return v.lower()
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log_level is a valid Python logging level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v.upper()

    @property
    def base_url(self) -> str:
        return self.square_environment.base_url


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for scripts using the client."""
    logging.basicConfig(
        level=getattr(logging, (level or settings.log_level).upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
