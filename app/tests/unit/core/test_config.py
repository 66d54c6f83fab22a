"""Tests for core.config module."""

from pathlib import Path

import pytest

from core.config import LocalizationSettings, Settings


@pytest.mark.unit
class TestLocalizationSettings:
    """Tests for LocalizationSettings."""

    def test_defaults(self, clean_localization_env):
        """No directory is configured and UTF-8 is on by default."""
        settings = LocalizationSettings()
        assert settings.LOCALES_DIR is None
        assert settings.LOCALES_UTF8 is True

    def test_reads_environment(self, clean_localization_env, monkeypatch):
        """Values come from environment variables."""
        monkeypatch.setenv("LOCALES_DIR", "/srv/i18n")
        monkeypatch.setenv("LOCALES_UTF8", "false")

        settings = LocalizationSettings()

        assert settings.LOCALES_DIR == Path("/srv/i18n")
        assert settings.LOCALES_UTF8 is False

    def test_reads_env_file(self, clean_localization_env):
        """Values come from a .env file in the working directory."""
        (clean_localization_env / ".env").write_text("LOCALES_DIR=./locales\n")

        settings = LocalizationSettings()

        assert settings.LOCALES_DIR == Path("./locales")


@pytest.mark.unit
class TestSettings:
    """Tests for the top-level Settings."""

    def test_nested_localization_settings(self, clean_localization_env):
        """Settings builds its localization section."""
        settings = Settings()
        assert isinstance(settings.localization, LocalizationSettings)
        assert settings.LOG_LEVEL == "INFO"

    def test_is_production_without_prefix(self, clean_localization_env):
        """No PREFIX means production."""
        assert Settings(PREFIX="").is_production is True

    def test_is_not_production_with_prefix(self, clean_localization_env):
        """A PREFIX marks a development deployment."""
        assert Settings(PREFIX="dev-").is_production is False

    def test_explicit_localization_section(self, clean_localization_env):
        """A provided localization section is kept."""
        section = LocalizationSettings(LOCALES_UTF8=False)
        settings = Settings(localization=section)
        assert settings.localization.LOCALES_UTF8 is False
