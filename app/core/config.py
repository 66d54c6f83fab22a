"""Localization library configuration settings."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LocalizationSettings(BaseSettings):
    """Catalog loading configuration settings.

    Environment Variables:
        LOCALES_DIR: Directory (or single file) holding the JSON localization
            sources loaded by the default localizer.
        LOCALES_UTF8: Decode localization files as UTF-8 (default: true).
            Set to false for legacy files that must be read byte-for-byte.
    """

    LOCALES_DIR: Optional[Path] = Field(default=None, alias="LOCALES_DIR")
    LOCALES_UTF8: bool = Field(default=True, alias="LOCALES_UTF8")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


class Settings(BaseSettings):
    """Localization library configuration settings."""

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    localization: LocalizationSettings

    @property
    def is_production(self) -> bool:
        """Check if the library is running in production."""
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        settings_map = {
            "localization": LocalizationSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create the settings instance
settings = Settings()
