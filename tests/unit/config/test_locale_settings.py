"""
Tests for LocaleSettings
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from locale_registry.config import LocaleSettings, get_settings, reload_settings


def test_defaults():
    settings = LocaleSettings(_env_file=None)
    assert settings.filename_prefix == "active"
    assert settings.default_language == "en"
    assert settings.locales_dir is None
    assert settings.initial_locale is None
    assert settings.log_level == "INFO"


def test_environment_binding(monkeypatch, tmp_path):
    monkeypatch.setenv("LOCALE_REGISTRY_FILENAME_PREFIX", "translate")
    monkeypatch.setenv("LOCALE_REGISTRY_DEFAULT_LANGUAGE", "zh-CN")
    monkeypatch.setenv("LOCALE_REGISTRY_LOCALES_DIR", str(tmp_path))
    monkeypatch.setenv("LOCALE_REGISTRY_INITIAL_LOCALE", "中文")
    monkeypatch.setenv("LOCALE_REGISTRY_LOG_LEVEL", "debug")

    settings = LocaleSettings(_env_file=None)

    assert settings.filename_prefix == "translate"
    assert settings.default_language == "zh-CN"
    assert settings.locales_dir == Path(tmp_path)
    assert settings.initial_locale == "中文"
    assert settings.log_level == "DEBUG"


def test_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("LOCALE_REGISTRY_DEFAULT_LANGUAGE=fr\n", encoding="utf-8")

    settings = LocaleSettings(_env_file=env_file)

    assert settings.default_language == "fr"


def test_blank_initial_locale_is_none(monkeypatch):
    monkeypatch.setenv("LOCALE_REGISTRY_INITIAL_LOCALE", "   ")
    assert LocaleSettings(_env_file=None).initial_locale is None


def test_prefix_is_trimmed():
    assert LocaleSettings(_env_file=None, filename_prefix=" active ").filename_prefix == "active"


@pytest.mark.parametrize(
    "overrides",
    [
        {"filename_prefix": "  "},
        {"log_level": "LOUD"},
    ],
)
def test_invalid_values(overrides):
    with pytest.raises(ValidationError):
        LocaleSettings(_env_file=None, **overrides)


def test_reload_settings(monkeypatch):
    original = get_settings()
    monkeypatch.setenv("LOCALE_REGISTRY_DEFAULT_LANGUAGE", "de")
    try:
        reloaded = reload_settings()
        assert reloaded is get_settings()
        assert reloaded is not original
        assert reloaded.default_language == "de"
    finally:
        monkeypatch.delenv("LOCALE_REGISTRY_DEFAULT_LANGUAGE")
        reload_settings()
