"""Shared fixtures for the whole test suite."""

import pytest


@pytest.fixture
def clean_localization_env(monkeypatch, tmp_path):
    """Isolate settings from the environment and any local .env file."""
    monkeypatch.delenv("LOCALES_DIR", raising=False)
    monkeypatch.delenv("LOCALES_UTF8", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
