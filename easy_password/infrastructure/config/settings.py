"""Library settings using Pydantic Settings"""

import json
import logging
import os
from typing import Annotated, List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


def get_env_file() -> str | None:
    """
    Which .env file to load, if any.

    Libraries should not pick up a stray .env from the working directory,
    so a file is only read when EASY_PASSWORD_ENV_FILE points at one.
    """
    return os.getenv("EASY_PASSWORD_ENV_FILE") or None


class Settings(BaseSettings):
    """
    Process-wide defaults for the password registry.

    Every field can be set through the environment variable named in its
    validation_alias.
    """

    # Display policy
    hide: bool = Field(default=True, validation_alias="EASY_PASSWORD_HIDE")

    # Registry defaults
    default_generator: Optional[str] = Field(
        default=None, validation_alias="EASY_PASSWORD_DEFAULT_GENERATOR"
    )
    default_checkers: Annotated[Optional[List[str]], NoDecode] = Field(
        default=None, validation_alias="EASY_PASSWORD_DEFAULT_CHECKERS"
    )

    # Stock generators/checkers
    generated_length: int = Field(
        default=16, ge=4, validation_alias="EASY_PASSWORD_GENERATED_LENGTH"
    )
    min_length: int = Field(default=8, ge=1, validation_alias="EASY_PASSWORD_MIN_LENGTH")

    # Logging
    log_level: str = Field(default="WARNING", validation_alias="EASY_PASSWORD_LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=get_env_file(),
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("default_checkers", mode="before")
    @classmethod
    def split_checker_names(cls, value):
        """Accept a JSON list or a comma-separated string"""
        if isinstance(value, str):
            value = value.strip()
            if value.startswith("["):
                value = json.loads(value)
            else:
                value = [name.strip() for name in value.split(",")]
        if value is not None:
            value = [name for name in value if name]
        return value or None

    @field_validator("default_generator", mode="before")
    @classmethod
    def blank_generator_is_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("log_level")
    @classmethod
    def known_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get settings singleton"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment"""
    global _settings
    _settings = None
