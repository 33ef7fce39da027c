"""
Tests for the Locales session
"""

import pytest

from locale_registry import (
    InvalidTagError,
    LocaleEntry,
    LocaleNotLoadedError,
    LocaleNotSetError,
    LocaleRegistryError,
    Locales,
    MessageNotFoundError,
)
from locale_registry.config import LocaleSettings


class TestConstruction:
    @pytest.mark.parametrize("default_language", ["zh-CN", "zh_CN", "zh", "en"])
    def test_valid_default_language(self, default_language):
        locales = Locales("active", default_language)
        assert locales.get_locales() == []
        assert locales.current_tag is None

    def test_unknown_default_language(self):
        with pytest.raises(InvalidTagError):
            Locales("active", "foo")

    def test_empty_prefix(self):
        with pytest.raises(ValueError):
            Locales("", "en")


class TestLoading:
    def test_load_single_file(self, locales, test_data_dir):
        entry = locales.load_locale_file(None, test_data_dir / "active.en_US.toml")
        assert (entry.display_name, entry.tag_name) == ("English", "en-US")

    def test_load_two_files(self, locales, test_data_dir):
        locales.load_locale_file(None, test_data_dir / "active.en_US.toml")
        locales.load_locale_file(None, test_data_dir / "active.zh-CN.toml")
        assert locales.get_locales() == ["en-US", "zh-CN"]
        assert locales.get_locale_names() == ["English", "中文"]

    def test_same_display_name_replaces_tag(self, locales, test_data_dir):
        locales.load_locale_file(None, test_data_dir / "active.en_US.toml")
        locales.load_locale_file(None, test_data_dir / "active.en_AU.toml")
        assert locales.get_locales() == ["en-AU"]
        assert locales.get_locale_names() == ["English"]

    def test_same_tag_replaces_display_name(self, locales, test_data_dir):
        locales.load_locale_file(None, test_data_dir / "active.en_US.toml")
        locales.load_locale_file(None, test_data_dir / "active.en-US.toml")
        assert locales.get_locales() == ["en-US"]
        assert locales.get_locale_names() == ["English(US)"]

    def test_load_from_resource_root(self, locales, test_data_dir):
        locales.load_locale_file(test_data_dir, "active.en-US.toml")
        locales.load_locale_file(test_data_dir, "active.zh-CN.toml")
        assert locales.get_locales() == ["en-US", "zh-CN"]

    @pytest.mark.parametrize(
        "filename",
        [
            "active.badtag.toml",
            "active.foo.toml",
            "active.en.toml",
            "translate.zh-CN.toml",
            "active.af.toml",
            "active.de-AT.toml",
        ],
    )
    def test_bad_files_are_rejected(self, locales, test_data_dir, filename):
        with pytest.raises(LocaleRegistryError):
            locales.load_locale_file(test_data_dir, filename)
        assert locales.get_locales() == []

    def test_load_directory(self, locales, test_data_dir):
        report = locales.load_locales_dir(test_data_dir)
        assert len(report.succeeded) == 4
        assert len(report.failed) == 7
        assert locales.get_locales() == ["en-US", "zh-CN"]
        assert locales.get_locale_names() == ["English", "中文"]


class TestQueries:
    @pytest.fixture
    def loaded(self, locales, test_data_dir):
        locales.load_locale_file(test_data_dir, "active.en-US.toml")
        locales.load_locale_file(test_data_dir, "active.zh-CN.toml")
        return locales

    def test_tag_name_of(self, loaded):
        assert loaded.tag_name_of("中文") == "zh-CN"
        assert loaded.tag_name_of("English(US)") == "en-US"
        with pytest.raises(LocaleNotLoadedError):
            loaded.tag_name_of("简体中文")

    def test_display_name_of(self, loaded):
        assert loaded.display_name_of("zh-CN") == "中文"
        assert loaded.display_name_of("en_US") == "English(US)"
        with pytest.raises(LocaleNotLoadedError):
            loaded.display_name_of("de-AT")
        with pytest.raises(LocaleNotLoadedError):
            loaded.display_name_of("not a tag")

    def test_tags_and_names_are_paired(self, loaded):
        for tag, name in zip(loaded.get_locales(), loaded.get_locale_names()):
            assert loaded.display_name_of(tag) == name
            assert loaded.tag_name_of(name) == tag

    def test_entries(self, loaded):
        assert [entry.display_name for entry in loaded.entries()] == ["English(US)", "中文"]


class TestTranslation:
    @pytest.fixture
    def loaded(self, locales, test_data_dir):
        locales.load_locales_dir(test_data_dir)
        return locales

    def test_translate_before_selection(self, loaded):
        with pytest.raises(LocaleNotSetError):
            loaded.tr("ID_TEST")

    def test_set_locale_by_name(self, loaded):
        assert loaded.set_locale_by_name("中文") == "zh-CN"
        assert loaded.current_tag == "zh-CN"
        assert loaded.current_display_name == "中文"
        assert loaded.tr("ID_TEST") == "世界，你好！"

    def test_set_locale_by_tag(self, loaded):
        assert loaded.set_locale_by_tag("en_US") == "English"
        assert loaded.tr("ID_TEST") == "hello, world!"
        assert loaded.tr("ID_APPLES") == "many apples"
        assert loaded.tr("menu.close") == "Close"

    def test_set_locale_by_unloaded_tag(self, loaded):
        with pytest.raises(LocaleNotLoadedError):
            loaded.set_locale_by_tag("en-AU")
        assert loaded.current_tag is None

    def test_set_locale_accepts_name_or_tag(self, loaded):
        assert loaded.set_locale("中文") == LocaleEntry("中文", loaded.registry.tag_of("中文"))
        assert loaded.set_locale("en-US").display_name == "English"
        with pytest.raises(LocaleNotLoadedError):
            loaded.set_locale("Klingon")

    def test_missing_message(self, loaded):
        loaded.set_locale_by_name("English")
        with pytest.raises(MessageNotFoundError):
            loaded.tr("ID_MISSING")
        assert loaded.translate("ID_MISSING", "fallback") == "fallback"
        assert loaded.localize("ID_MISSING", "") == ""

    def test_default_language_fallback(self, test_data_dir):
        locales = Locales("active", "en-US")
        locales.load_locales_dir(test_data_dir)
        locales.set_locale_by_tag("zh-CN")
        assert locales.tr("ID_ONLY_US") == "howdy"


class TestFromSettings:
    def test_loads_directory_and_selects_locale(self, test_data_dir):
        settings = LocaleSettings(locales_dir=test_data_dir, initial_locale="zh_CN")
        locales = Locales.from_settings(settings)
        assert locales.get_locales() == ["en-US", "zh-CN"]
        assert locales.current_display_name == "中文"

    def test_nothing_configured(self):
        locales = Locales.from_settings(LocaleSettings(_env_file=None))
        assert locales.get_locales() == []
        assert locales.current_tag is None

    def test_unknown_initial_locale(self, test_data_dir):
        settings = LocaleSettings(locales_dir=test_data_dir, initial_locale="Klingon")
        with pytest.raises(LocaleNotLoadedError):
            Locales.from_settings(settings)


def test_repr(locales, test_data_dir):
    locales.load_locale_file(test_data_dir, "active.zh-CN.toml")
    locales.set_locale("zh-CN")
    assert repr(locales) == "Locales(prefix='active', default='en', loaded=['zh-CN'], current='zh-CN')"
