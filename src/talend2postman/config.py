"""Converter settings loaded from environment variables / .env file."""

from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from talend2postman.errors import ConfigError

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Runtime settings. CLI options take precedence over these values."""

    model_config = SettingsConfigDict(
        env_prefix="TALEND2POSTMAN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    indent: int = Field(default=2, ge=0, description="Indentation of the written JSON.")
    log_level: LogLevel = Field(default="WARNING", description="Root log level for the CLI.")

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


def get_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigError(f"invalid TALEND2POSTMAN_* setting: {e}") from e
