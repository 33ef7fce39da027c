from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from locale_registry import Locales
from locale_registry.config import reload_settings

TEST_DATA_DIR = Path(__file__).resolve().parent / "unit" / "test_data"


def pytest_configure() -> None:
    """Keep a developer's shell settings out of the settings tests."""
    import os

    for key in list(os.environ):
        if key.startswith("LOCALE_REGISTRY_"):
            del os.environ[key]
    reload_settings()


@pytest.fixture
def test_data_dir() -> Path:
    return TEST_DATA_DIR


@pytest.fixture
def locales() -> Locales:
    return Locales("active", "en")


@pytest.fixture
def write_locale(tmp_path: Path) -> Callable[..., Path]:
    """Write a locale file under tmp_path and return its path."""

    def _write(filename: str, content: str, subdir: str = "") -> Path:
        directory = tmp_path / subdir if subdir else tmp_path
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / filename
        path.write_text(content, encoding="utf-8")
        return path

    return _write
