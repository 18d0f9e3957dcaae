# hide/service/config.py

"""Application configuration using Pydantic Settings.

Manages environment variables, defaults, and validation rules.
"""

import logging
import os
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_NAME = "hide"
CONFIG_NAME = "hide-cfg"


def default_config_path() -> Path:
    """Returns the per-user location of the key configuration file."""
    base = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(base) / APP_NAME / f"{CONFIG_NAME}.yaml"


class Settings(BaseSettings):
    """Application settings.

    Loads values from environment variables (prefix 'HIDE_') or .env file.
    Built once in the entry point and passed down explicitly.
    """

    model_config = SettingsConfigDict(
        env_prefix="HIDE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    config_path: Path = Field(
        default_factory=default_config_path,
        description="YAML file holding the persisted set of keys to redact.",
    )

    log_level: str = Field(
        default="WARNING",
        description="Logging level used when --debug is not given.",
    )

    indent: int = Field(
        default=2,
        ge=0,
        description="Number of spaces used to pretty-print the output document.",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure the level is one the logging module knows."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level
