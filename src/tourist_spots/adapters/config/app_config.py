"""12-factor configuration adapter using environment variables."""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tourist_spots.domain.models import Language


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    default_language: str = Field(
        default="zh-Hant",
        description="Language used until the user selects one: 'zh-Hant', 'en' or 'ja'",
    )
    settings_file: str = Field(
        default="settings.json",
        description="Path to the JSON file holding user settings such as the selected language",
    )
    # If not set, the embedded sample spots are used
    catalog_file: str | None = Field(
        default=None,
        description="Path to a TOML file with [[spots]] tables replacing the embedded catalog",
    )
    log_level: str = Field(default="INFO", description="Logging level name")

    @field_validator("default_language")
    @classmethod
    def validate_default_language(cls, v: str) -> str:
        """Validate the default language is supported, normalizing its code."""
        return Language.from_code(v).code

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("log_level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return level

    @property
    def language(self) -> Language:
        return Language.from_code(self.default_language)

    @property
    def logging_level(self) -> int:
        return logging.getLevelName(self.log_level)
